from sqlmodel import Session, col, select

from filmes_api.converters import endereco as endereco_converters
from filmes_api.models.endereco import Endereco, EnderecoCreate, EnderecoUpdate


def get_endereco_by_id(*, session: Session, id: int) -> Endereco | None:
    return session.get(Endereco, id)


def get_enderecos(*, session: Session, skip: int, take: int) -> list[Endereco]:
    stmt = select(Endereco).order_by(col(Endereco.id)).offset(skip).limit(take)
    return list(session.exec(stmt).all())


def create_endereco(*, session: Session, endereco_create: EnderecoCreate) -> Endereco:
    db_obj = endereco_converters.to_model(endereco_create)
    session.add(db_obj)
    session.flush()  # Make sure the ID is generated
    return db_obj


def update_endereco(
    *,
    db_endereco: Endereco,
    endereco_update: EnderecoUpdate,
) -> Endereco:
    return endereco_converters.apply_update(endereco_update, db_endereco)


def delete_endereco(*, session: Session, db_endereco: Endereco) -> None:
    session.delete(db_endereco)
    session.flush()
