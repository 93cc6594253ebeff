from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Path, Query
from sqlmodel import Session

from filmes_api.core.db import engine
from filmes_api.models.utils import SQL_INTEGER_MAX


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]

# Upper bounds are the storage limit of an INTEGER column, not a page size cap
SkipQuery = Annotated[
    int,
    Query(ge=0, le=SQL_INTEGER_MAX, description="Number of records to skip"),
]
TakeQuery = Annotated[
    int,
    Query(ge=0, le=SQL_INTEGER_MAX, description="Maximum number of records to return"),
]
IdPath = Annotated[int, Path(le=SQL_INTEGER_MAX, description="ID of the record")]
