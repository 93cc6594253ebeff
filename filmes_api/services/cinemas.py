from loguru import logger
from sqlmodel import Session

from filmes_api.converters import cinema as cinema_converters
from filmes_api.crud import cinema as cinemas_crud
from filmes_api.exceptions.base import AppError
from filmes_api.exceptions.cinema_exceptions import CinemaNotFoundError
from filmes_api.exceptions.endereco_exceptions import EnderecoInUseError
from filmes_api.models.cinema import Cinema, CinemaCreate, CinemaUpdate
from filmes_api.schemas.cinema import CinemaPublic
from filmes_api.services import enderecos as enderecos_service


def get_existing_cinema(*, session: Session, cinema_id: int) -> Cinema:
    cinema = cinemas_crud.get_cinema_by_id(session=session, id=cinema_id)
    if cinema is None:
        logger.debug(f"Cinema {cinema_id} not found")
        raise CinemaNotFoundError(cinema_id)
    return cinema


def _check_endereco_available(
    *,
    session: Session,
    endereco_id: int,
    cinema_id: int | None = None,
) -> None:
    """
    Make sure the address exists and is not used by a cinema other than
    `cinema_id`.

    Raises:
        EnderecoNotFoundError: If the address does not exist.
        EnderecoInUseError: If another cinema is located at the address.
    """
    enderecos_service.get_existing_endereco(session=session, endereco_id=endereco_id)
    occupant = cinemas_crud.get_cinema_by_endereco_id(
        session=session,
        endereco_id=endereco_id,
    )
    if occupant is not None and occupant.id != cinema_id:
        raise EnderecoInUseError(endereco_id)


def create_cinema(*, session: Session, cinema_create: CinemaCreate) -> CinemaPublic:
    _check_endereco_available(session=session, endereco_id=cinema_create.endereco_id)

    try:
        cinema = cinemas_crud.create_cinema(
            session=session,
            cinema_create=cinema_create,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    session.refresh(cinema)
    logger.info(f"Created cinema {cinema.id} ({cinema.nome})")
    return cinema_converters.to_public(cinema)


def get_cinemas(*, session: Session, skip: int, take: int) -> list[CinemaPublic]:
    db_cinemas = cinemas_crud.get_cinemas(session=session, skip=skip, take=take)
    return [cinema_converters.to_public(cinema) for cinema in db_cinemas]


def get_cinema_by_id(*, session: Session, cinema_id: int) -> CinemaPublic:
    cinema = get_existing_cinema(session=session, cinema_id=cinema_id)
    return cinema_converters.to_public(cinema)


def update_cinema(
    *,
    session: Session,
    cinema_id: int,
    cinema_update: CinemaUpdate,
) -> None:
    """
    Replace all fields of an existing cinema.

    Raises:
        CinemaNotFoundError: If the cinema does not exist.
        EnderecoNotFoundError: If the new address does not exist.
        EnderecoInUseError: If another cinema is located at the new address.
        AppError: If there is an error during the update operation.
    """
    cinema = get_existing_cinema(session=session, cinema_id=cinema_id)
    _check_endereco_available(
        session=session,
        endereco_id=cinema_update.endereco_id,
        cinema_id=cinema_id,
    )

    try:
        cinemas_crud.update_cinema(db_cinema=cinema, cinema_update=cinema_update)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Updated cinema {cinema_id}")


def delete_cinema(*, session: Session, cinema_id: int) -> None:
    cinema = get_existing_cinema(session=session, cinema_id=cinema_id)

    try:
        cinemas_crud.delete_cinema(session=session, db_cinema=cinema)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Deleted cinema {cinema_id}")
