from sqlmodel import Session, col, select

from filmes_api.converters import cinema as cinema_converters
from filmes_api.models.cinema import Cinema, CinemaCreate, CinemaUpdate


def get_cinema_by_id(*, session: Session, id: int) -> Cinema | None:
    """
    Retrieve a cinema by its ID, with its address joined in.
    Parameters:
        session (Session): The database session.
        id (int): The ID of the cinema.
    Returns:
        Cinema | None: The cinema if found, otherwise None.
    """
    return session.get(Cinema, id)


def get_cinema_by_endereco_id(*, session: Session, endereco_id: int) -> Cinema | None:
    stmt = select(Cinema).where(col(Cinema.endereco_id) == endereco_id)
    return session.exec(stmt).unique().one_or_none()


def get_cinemas(*, session: Session, skip: int, take: int) -> list[Cinema]:
    stmt = select(Cinema).order_by(col(Cinema.id)).offset(skip).limit(take)
    return list(session.exec(stmt).unique().all())


def create_cinema(*, session: Session, cinema_create: CinemaCreate) -> Cinema:
    """
    Add a new cinema and flush the session to ensure integrity.

    Parameters:
        session (Session): The database session.
        cinema_create (CinemaCreate): The cinema data.
    Returns:
        Cinema: The created cinema.
    Raises:
        IntegrityError: If the address does not exist or already has a cinema.
    """
    db_obj = cinema_converters.to_model(cinema_create)
    session.add(db_obj)
    session.flush()
    return db_obj


def update_cinema(*, db_cinema: Cinema, cinema_update: CinemaUpdate) -> Cinema:
    return cinema_converters.apply_update(cinema_update, db_cinema)


def delete_cinema(*, session: Session, db_cinema: Cinema) -> None:
    session.delete(db_cinema)
    session.flush()
