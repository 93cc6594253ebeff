from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .sessao import Sessao

__all__ = [
    "FilmeBase",
    "FilmeCreate",
    "FilmeUpdate",
    "Filme",
]


# Shared properties
class FilmeBase(SQLModel):
    titulo: str = Field(min_length=1, description="Title of the movie")
    genero: str = Field(
        min_length=1,
        max_length=50,
        description="Genre of the movie, at most 50 characters",
    )
    duracao: int = Field(ge=70, le=600, description="Running time in minutes")


# Properties to receive on movie creation
class FilmeCreate(FilmeBase):
    pass


# Properties to receive on a full update. Every field is overlaid onto the row,
# so none of them are optional.
class FilmeUpdate(FilmeBase):
    pass


class Filme(FilmeBase, table=True):
    id: int | None = Field(
        default=None,
        primary_key=True,
        index=True,
    )
    sessoes: list["Sessao"] = Relationship(
        back_populates="filme",
        sa_relationship_kwargs={"cascade": "all"},
    )
