from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

from .utils import SQL_INTEGER_MAX

if TYPE_CHECKING:
    from .cinema import Cinema

__all__ = [
    "EnderecoBase",
    "EnderecoCreate",
    "EnderecoUpdate",
    "Endereco",
]


class EnderecoBase(SQLModel):
    logradouro: str = Field(min_length=1, description="Street name")
    numero: int = Field(ge=0, le=SQL_INTEGER_MAX, description="Street number")


class EnderecoCreate(EnderecoBase):
    pass


class EnderecoUpdate(EnderecoBase):
    pass


class Endereco(EnderecoBase, table=True):
    id: int | None = Field(
        default=None,
        primary_key=True,
        index=True,
    )
    cinema: Optional["Cinema"] = Relationship(
        back_populates="endereco",
        sa_relationship_kwargs={"uselist": False},
    )
