from loguru import logger
from sqlmodel import Session

from filmes_api.converters import endereco as endereco_converters
from filmes_api.crud import endereco as enderecos_crud
from filmes_api.exceptions.base import AppError
from filmes_api.exceptions.endereco_exceptions import (
    EnderecoInUseError,
    EnderecoNotFoundError,
)
from filmes_api.models.endereco import Endereco, EnderecoCreate, EnderecoUpdate
from filmes_api.schemas.endereco import EnderecoPublic


def get_existing_endereco(*, session: Session, endereco_id: int) -> Endereco:
    endereco = enderecos_crud.get_endereco_by_id(session=session, id=endereco_id)
    if endereco is None:
        logger.debug(f"Endereco {endereco_id} not found")
        raise EnderecoNotFoundError(endereco_id)
    return endereco


def create_endereco(
    *,
    session: Session,
    endereco_create: EnderecoCreate,
) -> EnderecoPublic:
    try:
        endereco = enderecos_crud.create_endereco(
            session=session,
            endereco_create=endereco_create,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    session.refresh(endereco)
    logger.info(f"Created endereco {endereco.id}")
    return endereco_converters.to_public(endereco)


def get_enderecos(*, session: Session, skip: int, take: int) -> list[EnderecoPublic]:
    return [
        endereco_converters.to_public(endereco)
        for endereco in enderecos_crud.get_enderecos(
            session=session,
            skip=skip,
            take=take,
        )
    ]


def get_endereco_by_id(*, session: Session, endereco_id: int) -> EnderecoPublic:
    endereco = get_existing_endereco(session=session, endereco_id=endereco_id)
    return endereco_converters.to_public(endereco)


def update_endereco(
    *,
    session: Session,
    endereco_id: int,
    endereco_update: EnderecoUpdate,
) -> None:
    endereco = get_existing_endereco(session=session, endereco_id=endereco_id)

    try:
        enderecos_crud.update_endereco(
            db_endereco=endereco,
            endereco_update=endereco_update,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Updated endereco {endereco_id}")


def delete_endereco(*, session: Session, endereco_id: int) -> None:
    """
    Delete an address that no cinema uses.

    Raises:
        EnderecoNotFoundError: If the address does not exist.
        EnderecoInUseError: If a cinema is located at the address.
        AppError: If there is an error during the delete operation.
    """
    endereco = get_existing_endereco(session=session, endereco_id=endereco_id)
    if endereco.cinema is not None:
        raise EnderecoInUseError(endereco_id)

    try:
        enderecos_crud.delete_endereco(session=session, db_endereco=endereco)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Deleted endereco {endereco_id}")
