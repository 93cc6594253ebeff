from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from .utils import SQL_INTEGER_MAX

if TYPE_CHECKING:
    from .endereco import Endereco
    from .sessao import Sessao

__all__ = [
    "CinemaBase",
    "CinemaCreate",
    "CinemaUpdate",
    "Cinema",
]


class CinemaBase(SQLModel):
    nome: str = Field(min_length=1, description="Name of the cinema")
    endereco_id: int = Field(
        le=SQL_INTEGER_MAX,
        description="ID of the address of the cinema",
    )


class CinemaCreate(CinemaBase):
    pass


class CinemaUpdate(CinemaBase):
    pass


class Cinema(CinemaBase, table=True):
    id: int | None = Field(
        default=None,
        primary_key=True,
        index=True,
    )
    # One cinema per address
    endereco_id: int = Field(foreign_key="endereco.id", unique=True)
    endereco: "Endereco" = Relationship(
        back_populates="cinema",
        sa_relationship_kwargs={"lazy": "joined"},
    )
    sessoes: list["Sessao"] = Relationship(
        back_populates="cinema",
        sa_relationship_kwargs={"cascade": "all"},
    )
