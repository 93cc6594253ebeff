from filmes_api.models.sessao import Sessao, SessaoCreate
from filmes_api.schemas.sessao import SessaoPublic


def to_model(sessao_create: SessaoCreate) -> Sessao:
    return Sessao(
        filme_id=sessao_create.filme_id,
        cinema_id=sessao_create.cinema_id,
    )


def to_public(sessao: Sessao) -> SessaoPublic:
    assert sessao.id is not None
    return SessaoPublic(
        id=sessao.id,
        filme_id=sessao.filme_id,
        cinema_id=sessao.cinema_id,
    )
