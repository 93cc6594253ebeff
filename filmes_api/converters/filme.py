from datetime import datetime

from filmes_api.models.filme import Filme, FilmeCreate, FilmeUpdate
from filmes_api.schemas.filme import FilmePublic


def to_model(filme_create: FilmeCreate) -> Filme:
    return Filme(
        titulo=filme_create.titulo,
        genero=filme_create.genero,
        duracao=filme_create.duracao,
    )


def apply_update(filme_update: FilmeUpdate, filme: Filme) -> Filme:
    """
    Overlay every field of the update onto the existing movie, whether or not
    it was explicitly set by the client.
    """
    filme.titulo = filme_update.titulo
    filme.genero = filme_update.genero
    filme.duracao = filme_update.duracao
    return filme


def to_update(filme: Filme) -> FilmeUpdate:
    return FilmeUpdate(
        titulo=filme.titulo,
        genero=filme.genero,
        duracao=filme.duracao,
    )


def to_public(filme: Filme, *, hora_da_consulta: datetime | None = None) -> FilmePublic:
    assert filme.id is not None, "Filme must be persisted before it is read"
    return FilmePublic(
        id=filme.id,
        titulo=filme.titulo,
        genero=filme.genero,
        duracao=filme.duracao,
        hora_da_consulta=hora_da_consulta or datetime.now(),
    )
