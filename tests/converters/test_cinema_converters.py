from filmes_api.converters import cinema as cinema_converters
from filmes_api.converters import sessao as sessao_converters
from filmes_api.models.cinema import Cinema, CinemaCreate, CinemaUpdate
from filmes_api.models.endereco import Endereco
from filmes_api.models.sessao import Sessao, SessaoCreate
from filmes_api.schemas.cinema import CinemaPublic


def test_to_model():
    cinema = cinema_converters.to_model(CinemaCreate(nome="Cine Joia", endereco_id=3))

    assert cinema.id is None
    assert cinema.nome == "Cine Joia"
    assert cinema.endereco_id == 3


def test_apply_update():
    cinema = Cinema(id=1, nome="Antigo", endereco_id=1)

    cinema_converters.apply_update(CinemaUpdate(nome="Novo", endereco_id=2), cinema)

    assert (cinema.id, cinema.nome, cinema.endereco_id) == (1, "Novo", 2)


def test_to_public_maps_endereco_and_sessoes():
    endereco = Endereco(id=5, logradouro="Rua Fradique Coutinho", numero=361)
    cinema = Cinema(id=2, nome="Cinesala", endereco_id=5, endereco=endereco)
    cinema.sessoes = [
        Sessao(id=10, filme_id=7, cinema_id=2),
        Sessao(id=11, filme_id=8, cinema_id=2),
    ]

    result = cinema_converters.to_public(cinema)

    assert isinstance(result, CinemaPublic)
    assert result.endereco.model_dump() == {
        "id": 5,
        "logradouro": "Rua Fradique Coutinho",
        "numero": 361,
    }
    assert [sessao.id for sessao in result.sessoes] == [10, 11]
    assert [sessao.filme_id for sessao in result.sessoes] == [7, 8]


def test_sessao_to_model():
    sessao = sessao_converters.to_model(SessaoCreate(filme_id=1, cinema_id=2))

    assert sessao.id is None
    assert (sessao.filme_id, sessao.cinema_id) == (1, 2)
