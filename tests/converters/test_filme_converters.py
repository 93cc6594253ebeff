from datetime import datetime

from filmes_api.converters import filme as filme_converters
from filmes_api.models.filme import Filme, FilmeCreate, FilmeUpdate
from filmes_api.schemas.filme import FilmePublic


def test_to_model_has_no_id():
    filme_create = FilmeCreate(titulo="Pixote", genero="Drama", duracao=128)

    filme = filme_converters.to_model(filme_create)

    assert isinstance(filme, Filme)
    assert filme.id is None
    assert (filme.titulo, filme.genero, filme.duracao) == ("Pixote", "Drama", 128)


def test_apply_update_overlays_every_field():
    filme = Filme(id=4, titulo="Antigo", genero="Drama", duracao=90)
    filme_update = FilmeUpdate(titulo="Novo", genero="Comédia", duracao=95)

    result = filme_converters.apply_update(filme_update, filme)

    assert result is filme
    assert filme.id == 4
    assert (filme.titulo, filme.genero, filme.duracao) == ("Novo", "Comédia", 95)


def test_to_update_round_trips_fields():
    filme = Filme(id=2, titulo="Aquarius", genero="Drama", duracao=146)

    filme_update = filme_converters.to_update(filme)

    assert filme_update.model_dump() == {
        "titulo": "Aquarius",
        "genero": "Drama",
        "duracao": 146,
    }


def test_to_public():
    filme = Filme(id=9, titulo="Macunaíma", genero="Comédia", duracao=108)
    moment = datetime(2024, 5, 1, 20, 30)

    result = filme_converters.to_public(filme, hora_da_consulta=moment)

    assert isinstance(result, FilmePublic)
    assert result.id == 9
    assert result.titulo == "Macunaíma"
    assert result.hora_da_consulta == moment


def test_to_public_defaults_hora_da_consulta_to_now():
    filme = Filme(id=1, titulo="Carandiru", genero="Drama", duracao=145)
    before = datetime.now()

    result = filme_converters.to_public(filme)

    assert before <= result.hora_da_consulta <= datetime.now()
