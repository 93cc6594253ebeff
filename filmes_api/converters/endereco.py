from filmes_api.models.endereco import Endereco, EnderecoCreate, EnderecoUpdate
from filmes_api.schemas.endereco import EnderecoPublic


def to_model(endereco_create: EnderecoCreate) -> Endereco:
    return Endereco(
        logradouro=endereco_create.logradouro,
        numero=endereco_create.numero,
    )


def apply_update(endereco_update: EnderecoUpdate, endereco: Endereco) -> Endereco:
    endereco.logradouro = endereco_update.logradouro
    endereco.numero = endereco_update.numero
    return endereco


def to_public(endereco: Endereco) -> EnderecoPublic:
    assert endereco.id is not None
    return EnderecoPublic(
        id=endereco.id,
        logradouro=endereco.logradouro,
        numero=endereco.numero,
    )
