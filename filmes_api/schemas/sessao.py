from filmes_api.models.sessao import SessaoBase

__all__ = [
    "SessaoPublic",
]


class SessaoPublic(SessaoBase):
    id: int
