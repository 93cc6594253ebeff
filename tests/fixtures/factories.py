import pytest
from factory import (
    Factory,  # type: ignore
    Faker,  # type: ignore
    SelfAttribute,  # type: ignore
    SubFactory,  # type: ignore
)
from factory.alchemy import SQLAlchemyModelFactory
from sqlmodel import Session

from filmes_api.models.cinema import Cinema, CinemaCreate
from filmes_api.models.endereco import Endereco, EnderecoCreate
from filmes_api.models.filme import Filme, FilmeCreate, FilmeUpdate
from filmes_api.models.sessao import Sessao

__all__ = [
    "filme_create_factory",
    "filme_update_factory",
    "filme_factory",
    "endereco_create_factory",
    "endereco_factory",
    "cinema_create_factory",
    "cinema_factory",
    "sessao_factory",
]

GENEROS = ["Ação", "Drama", "Comédia", "Terror", "Ficção científica", "Animação"]


class SQLModelFactory(SQLAlchemyModelFactory):
    class Meta:
        abstract = True
        sqlalchemy_session_persistence = "flush"


def _bind(session: Session, *factories: type[SQLAlchemyModelFactory]) -> None:
    for factory_class in factories:
        factory_class._meta.sqlalchemy_session = session


# --------------------------------------
# FACTORIES
# --------------------------------------


class FilmeCreateFactory(Factory):
    class Meta:
        model = FilmeCreate

    titulo = Faker("sentence", nb_words=3)
    genero = Faker("random_element", elements=GENEROS)
    duracao = Faker("random_int", min=70, max=600)


@pytest.fixture
def filme_create_factory():
    return FilmeCreateFactory


class FilmeUpdateFactory(FilmeCreateFactory):
    class Meta:
        model = FilmeUpdate


@pytest.fixture
def filme_update_factory():
    return FilmeUpdateFactory


class FilmeFactory(SQLModelFactory):
    class Meta:
        model = Filme

    titulo = Faker("sentence", nb_words=3)
    genero = Faker("random_element", elements=GENEROS)
    duracao = Faker("random_int", min=70, max=600)


@pytest.fixture
def filme_factory(db_session: Session):
    _bind(db_session, FilmeFactory)
    return FilmeFactory


class EnderecoCreateFactory(Factory):
    class Meta:
        model = EnderecoCreate

    logradouro = Faker("street_name")
    numero = Faker("random_int", min=0, max=9999)


@pytest.fixture
def endereco_create_factory():
    return EnderecoCreateFactory


class EnderecoFactory(SQLModelFactory):
    class Meta:
        model = Endereco

    logradouro = Faker("street_name")
    numero = Faker("random_int", min=0, max=9999)


@pytest.fixture
def endereco_factory(db_session: Session):
    _bind(db_session, EnderecoFactory)
    return EnderecoFactory


class CinemaCreateFactory(Factory):
    class Meta:
        model = CinemaCreate

    nome = Faker("company")
    endereco_id: int


@pytest.fixture
def cinema_create_factory():
    return CinemaCreateFactory


class CinemaFactory(SQLModelFactory):
    class Meta:
        model = Cinema

    nome = Faker("company")
    endereco = SubFactory(EnderecoFactory)
    endereco_id = SelfAttribute("endereco.id")


@pytest.fixture
def cinema_factory(db_session: Session):
    _bind(db_session, EnderecoFactory, CinemaFactory)
    return CinemaFactory


class SessaoFactory(SQLModelFactory):
    class Meta:
        model = Sessao

    filme = SubFactory(FilmeFactory)
    filme_id = SelfAttribute("filme.id")
    cinema = SubFactory(CinemaFactory)
    cinema_id = SelfAttribute("cinema.id")


@pytest.fixture
def sessao_factory(db_session: Session):
    _bind(db_session, FilmeFactory, EnderecoFactory, CinemaFactory, SessaoFactory)
    return SessaoFactory
