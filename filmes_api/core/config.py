from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "FilmesAPI"
    API_PREFIX: str = ""

    DATABASE_URL: str = "sqlite:///./filmes.db"
    SQL_ECHO: bool = False

    DEBUG: bool = False
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False

    # Page size used by list endpoints when no take is given
    DEFAULT_TAKE: int = Field(default=50, ge=0)


settings = Settings()  # type: ignore
