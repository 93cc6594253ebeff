from collections.abc import Sequence
from datetime import datetime

from loguru import logger
from pydantic import ValidationError
from sqlmodel import Session

from filmes_api.converters import filme as filme_converters
from filmes_api.crud import filme as filmes_crud
from filmes_api.exceptions.base import AppError
from filmes_api.exceptions.filme_exceptions import FilmeNotFoundError
from filmes_api.exceptions.validation import (
    ValidationProblemError,
    errors_from_pydantic,
)
from filmes_api.inputs.patch import PatchError, PatchOperation, apply_patch
from filmes_api.models.filme import Filme, FilmeCreate, FilmeUpdate
from filmes_api.schemas.filme import FilmePublic


def _get_existing_filme(*, session: Session, filme_id: int) -> Filme:
    filme = filmes_crud.get_filme_by_id(session=session, id=filme_id)
    if filme is None:
        logger.debug(f"Filme {filme_id} not found")
        raise FilmeNotFoundError(filme_id)
    return filme


def create_filme(*, session: Session, filme_create: FilmeCreate) -> FilmePublic:
    """
    Create a movie and commit it.

    Parameters:
        session (Session): Database session.
        filme_create (FilmeCreate): Validated movie data.
    Returns:
        FilmePublic: The stored movie, including its new ID.
    Raises:
        AppError: If the movie could not be stored.
    """
    try:
        filme = filmes_crud.create_filme(session=session, filme_create=filme_create)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    session.refresh(filme)
    logger.info(f"Created filme {filme.id} ({filme.titulo})")
    return filme_converters.to_public(filme)


def get_filmes(*, session: Session, skip: int, take: int) -> list[FilmePublic]:
    """
    Get a page of movies.

    Parameters:
        session (Session): Database session.
        skip (int): Number of movies to skip.
        take (int): Maximum number of movies to return. Not capped.
    Returns:
        list[FilmePublic]: The movies on the page.
    """
    hora_da_consulta = datetime.now()
    return [
        filme_converters.to_public(filme, hora_da_consulta=hora_da_consulta)
        for filme in filmes_crud.get_filmes(session=session, skip=skip, take=take)
    ]


def get_filme_by_id(*, session: Session, filme_id: int) -> FilmePublic:
    """
    Get a movie by its ID.

    Raises:
        FilmeNotFoundError: If the movie with the given ID does not exist.
    """
    filme = _get_existing_filme(session=session, filme_id=filme_id)
    return filme_converters.to_public(filme)


def update_filme(
    *,
    session: Session,
    filme_id: int,
    filme_update: FilmeUpdate,
) -> None:
    """
    Replace all fields of an existing movie.

    Parameters:
        session (Session): The database session.
        filme_id (int): The ID of the movie to update.
        filme_update (FilmeUpdate): The new movie data.
    Raises:
        FilmeNotFoundError: If the movie with the given ID does not exist.
        AppError: If there is an error during the update operation.
    """
    filme = _get_existing_filme(session=session, filme_id=filme_id)

    try:
        filmes_crud.update_filme(db_filme=filme, filme_update=filme_update)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Updated filme {filme_id}")


def patch_filme(
    *,
    session: Session,
    filme_id: int,
    operations: Sequence[PatchOperation],
) -> None:
    """
    Apply JSON-Patch operations to a movie.

    The operations run against the movie's update schema, not the row itself.
    The result has to validate as a full FilmeUpdate before it is written back.

    Parameters:
        session (Session): The database session.
        filme_id (int): The ID of the movie to patch.
        operations (Sequence[PatchOperation]): The operations, applied in order.
    Raises:
        FilmeNotFoundError: If the movie with the given ID does not exist.
        ValidationProblemError: If an operation cannot be applied or the
            patched movie is invalid. Nothing is written in that case.
        AppError: If there is an error while committing.
    """
    filme = _get_existing_filme(session=session, filme_id=filme_id)

    document = filme_converters.to_update(filme).model_dump()
    try:
        patched = apply_patch(document, operations)
    except PatchError as e:
        raise ValidationProblemError({e.field: [e.message]}) from e

    try:
        filme_update = FilmeUpdate.model_validate(patched)
    except ValidationError as e:
        raise ValidationProblemError(errors_from_pydantic(e.errors())) from e

    try:
        filmes_crud.update_filme(db_filme=filme, filme_update=filme_update)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Patched filme {filme_id} with {len(operations)} operation(s)")


def delete_filme(*, session: Session, filme_id: int) -> None:
    """
    Delete a movie and, through the cascade, its sessions.

    Raises:
        FilmeNotFoundError: If the movie with the given ID does not exist.
        AppError: If there is an error during the delete operation.
    """
    filme = _get_existing_filme(session=session, filme_id=filme_id)

    try:
        filmes_crud.delete_filme(session=session, db_filme=filme)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Deleted filme {filme_id}")
