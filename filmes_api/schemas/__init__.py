from .cinema import CinemaPublic
from .endereco import EnderecoPublic
from .filme import FilmePublic
from .problem import ValidationProblem
from .sessao import SessaoPublic

__all__ = [
    "CinemaPublic",
    "EnderecoPublic",
    "FilmePublic",
    "SessaoPublic",
    "ValidationProblem",
]
