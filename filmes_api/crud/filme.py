from sqlmodel import Session, col, select

from filmes_api.converters import filme as filme_converters
from filmes_api.models.filme import Filme, FilmeCreate, FilmeUpdate


def get_filme_by_id(*, session: Session, id: int) -> Filme | None:
    """
    Retrieve a movie by its ID.
    Parameters:
        session (Session): The database session.
        id (int): The ID of the movie to retrieve.
    Returns:
        Filme | None: The movie object if found, otherwise None.
    """
    return session.get(Filme, id)


def get_filmes(*, session: Session, skip: int, take: int) -> list[Filme]:
    """
    Retrieve a page of movies in insertion order.

    Parameters:
        session (Session): The database session.
        skip (int): Number of movies to skip.
        take (int): Maximum number of movies to return.
    Returns:
        list[Filme]: At most `take` movies, starting after the first `skip`.
    """
    stmt = select(Filme).order_by(col(Filme.id)).offset(skip).limit(take)
    return list(session.exec(stmt).all())


def create_filme(*, session: Session, filme_create: FilmeCreate) -> Filme:
    """
    Add a new movie and flush so the store assigns its ID. Does not commit.

    Parameters:
        session (Session): The database session.
        filme_create (FilmeCreate): The movie data to create.
    Returns:
        Filme: The created movie object, with its ID set.
    """
    db_obj = filme_converters.to_model(filme_create)
    session.add(db_obj)
    session.flush()
    return db_obj


def update_filme(*, db_filme: Filme, filme_update: FilmeUpdate) -> Filme:
    """
    Overlay the update onto an existing movie. Does not flush or commit.
    Parameters:
        db_filme (Filme): The existing movie object to update.
        filme_update (FilmeUpdate): The updated movie data.
    Returns:
        Filme: The updated movie object.
    """
    return filme_converters.apply_update(filme_update, db_filme)


def delete_filme(*, session: Session, db_filme: Filme) -> None:
    session.delete(db_filme)
    session.flush()
