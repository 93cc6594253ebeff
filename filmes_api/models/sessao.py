from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from .utils import SQL_INTEGER_MAX

if TYPE_CHECKING:
    from .cinema import Cinema
    from .filme import Filme

__all__ = [
    "SessaoBase",
    "SessaoCreate",
    "Sessao",
]


class SessaoBase(SQLModel):
    filme_id: int = Field(le=SQL_INTEGER_MAX, description="ID of the movie being shown")
    cinema_id: int = Field(
        le=SQL_INTEGER_MAX,
        description="ID of the cinema showing the movie",
    )


class SessaoCreate(SessaoBase):
    pass


class Sessao(SessaoBase, table=True):
    id: int | None = Field(
        default=None,
        primary_key=True,
        index=True,
    )
    filme_id: int = Field(foreign_key="filme.id", index=True)
    filme: "Filme" = Relationship(back_populates="sessoes")
    cinema_id: int = Field(foreign_key="cinema.id", index=True)
    cinema: "Cinema" = Relationship(back_populates="sessoes")
