from loguru import logger
from sqlmodel import Session

from filmes_api.converters import sessao as sessao_converters
from filmes_api.crud import cinema as cinemas_crud
from filmes_api.crud import filme as filmes_crud
from filmes_api.crud import sessao as sessoes_crud
from filmes_api.exceptions.base import AppError
from filmes_api.exceptions.cinema_exceptions import CinemaNotFoundError
from filmes_api.exceptions.filme_exceptions import FilmeNotFoundError
from filmes_api.exceptions.sessao_exceptions import SessaoNotFoundError
from filmes_api.models.sessao import Sessao, SessaoCreate
from filmes_api.schemas.sessao import SessaoPublic


def _get_existing_sessao(*, session: Session, sessao_id: int) -> Sessao:
    sessao = sessoes_crud.get_sessao_by_id(session=session, id=sessao_id)
    if sessao is None:
        logger.debug(f"Sessao {sessao_id} not found")
        raise SessaoNotFoundError(sessao_id)
    return sessao


def create_sessao(*, session: Session, sessao_create: SessaoCreate) -> SessaoPublic:
    """
    Schedule a movie at a cinema.

    Raises:
        FilmeNotFoundError: If the movie does not exist.
        CinemaNotFoundError: If the cinema does not exist.
        AppError: If the session could not be stored.
    """
    if filmes_crud.get_filme_by_id(session=session, id=sessao_create.filme_id) is None:
        raise FilmeNotFoundError(sessao_create.filme_id)
    if cinemas_crud.get_cinema_by_id(session=session, id=sessao_create.cinema_id) is None:
        raise CinemaNotFoundError(sessao_create.cinema_id)

    try:
        sessao = sessoes_crud.create_sessao(
            session=session,
            sessao_create=sessao_create,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    session.refresh(sessao)
    logger.info(
        f"Created sessao {sessao.id} "
        f"(filme {sessao.filme_id}, cinema {sessao.cinema_id})"
    )
    return sessao_converters.to_public(sessao)


def get_sessoes(*, session: Session, skip: int, take: int) -> list[SessaoPublic]:
    return [
        sessao_converters.to_public(sessao)
        for sessao in sessoes_crud.get_sessoes(session=session, skip=skip, take=take)
    ]


def get_sessao_by_id(*, session: Session, sessao_id: int) -> SessaoPublic:
    sessao = _get_existing_sessao(session=session, sessao_id=sessao_id)
    return sessao_converters.to_public(sessao)


def delete_sessao(*, session: Session, sessao_id: int) -> None:
    sessao = _get_existing_sessao(session=session, sessao_id=sessao_id)

    try:
        sessoes_crud.delete_sessao(session=session, db_sessao=sessao)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(f"Deleted sessao {sessao_id}")
