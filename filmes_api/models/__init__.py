from .filme import Filme, FilmeCreate, FilmeUpdate
from .endereco import Endereco, EnderecoCreate, EnderecoUpdate
from .cinema import Cinema, CinemaCreate, CinemaUpdate
from .sessao import Sessao, SessaoCreate

__all__ = [
    "Filme",
    "FilmeCreate",
    "FilmeUpdate",
    "Endereco",
    "EnderecoCreate",
    "EnderecoUpdate",
    "Cinema",
    "CinemaCreate",
    "CinemaUpdate",
    "Sessao",
    "SessaoCreate",
]
