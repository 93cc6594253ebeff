from filmes_api.models.endereco import EnderecoBase

__all__ = [
    "EnderecoPublic",
]


class EnderecoPublic(EnderecoBase):
    id: int
