from filmes_api.converters import endereco as endereco_converters
from filmes_api.converters import sessao as sessao_converters
from filmes_api.models.cinema import Cinema, CinemaCreate, CinemaUpdate
from filmes_api.schemas.cinema import CinemaPublic


def to_model(cinema_create: CinemaCreate) -> Cinema:
    return Cinema(
        nome=cinema_create.nome,
        endereco_id=cinema_create.endereco_id,
    )


def apply_update(cinema_update: CinemaUpdate, cinema: Cinema) -> Cinema:
    cinema.nome = cinema_update.nome
    cinema.endereco_id = cinema_update.endereco_id
    return cinema


def to_public(cinema: Cinema) -> CinemaPublic:
    """
    Convert a Cinema to its public schema. The address and the sessions are
    pulled from the relationships on the model and converted with their own
    converters.

    Parameters:
        cinema (Cinema): A persisted cinema, attached to an open session so its
            relationships can load.
    Returns:
        CinemaPublic: The converted cinema.
    """
    assert cinema.id is not None
    return CinemaPublic(
        id=cinema.id,
        nome=cinema.nome,
        endereco_id=cinema.endereco_id,
        endereco=endereco_converters.to_public(cinema.endereco),
        sessoes=[sessao_converters.to_public(sessao) for sessao in cinema.sessoes],
    )
