from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from filmes_api.core.config import settings

# Import all table models so they are registered on SQLModel.metadata
from filmes_api import models  # noqa: F401


def make_engine(url: str, **kwargs) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    db_engine = create_engine(
        url,
        echo=settings.SQL_ECHO,
        connect_args=connect_args,
        **kwargs,
    )
    if url.startswith("sqlite"):
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
    return db_engine


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = make_engine(settings.DATABASE_URL)


def init_db(db_engine: Engine = engine) -> None:
    """
    Create all tables that do not exist yet. Schema migrations are not managed
    by this project, so this only ever adds missing tables.
    """
    SQLModel.metadata.create_all(db_engine)
