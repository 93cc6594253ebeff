from filmes_api.models.cinema import CinemaBase
from filmes_api.schemas.endereco import EnderecoPublic
from filmes_api.schemas.sessao import SessaoPublic

__all__ = [
    "CinemaPublic",
]


class CinemaPublic(CinemaBase):
    id: int
    endereco: EnderecoPublic
    sessoes: list[SessaoPublic]
