import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from filmes_api.crud import cinema as cinema_crud
from filmes_api.models.cinema import Cinema, CinemaCreate
from filmes_api.models.endereco import Endereco


def test_create_cinema(
    *,
    db_session: Session,
    endereco_factory,
    cinema_create_factory,
):
    endereco: Endereco = endereco_factory()
    cinema_create: CinemaCreate = cinema_create_factory(endereco_id=endereco.id)

    created_cinema = cinema_crud.create_cinema(
        session=db_session,
        cinema_create=cinema_create,
    )

    assert created_cinema.id is not None
    assert created_cinema.endereco_id == endereco.id
    assert created_cinema.endereco is endereco


def test_create_cinema_invalid_endereco(
    *,
    db_session: Session,
    cinema_create_factory,
):
    cinema_create: CinemaCreate = cinema_create_factory(endereco_id=1)

    with pytest.raises(IntegrityError):
        cinema_crud.create_cinema(session=db_session, cinema_create=cinema_create)


def test_create_cinema_duplicate_endereco(
    *,
    db_session: Session,
    cinema_factory,
    cinema_create_factory,
):
    cinema: Cinema = cinema_factory()
    cinema_create: CinemaCreate = cinema_create_factory(endereco_id=cinema.endereco_id)

    with pytest.raises(IntegrityError):
        cinema_crud.create_cinema(session=db_session, cinema_create=cinema_create)


def test_get_cinema_by_endereco_id(*, db_session: Session, cinema_factory):
    cinema: Cinema = cinema_factory()

    found = cinema_crud.get_cinema_by_endereco_id(
        session=db_session,
        endereco_id=cinema.endereco_id,
    )
    missing = cinema_crud.get_cinema_by_endereco_id(
        session=db_session,
        endereco_id=cinema.endereco_id + 1,
    )

    assert found is cinema
    assert missing is None


def test_get_cinemas(*, db_session: Session, cinema_factory):
    ids = [cinema.id for cinema in cinema_factory.create_batch(3)]

    cinemas = cinema_crud.get_cinemas(session=db_session, skip=0, take=2)

    assert [cinema.id for cinema in cinemas] == ids[:2]
