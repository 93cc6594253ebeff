from sqlmodel import Session, col, select

from filmes_api.converters import sessao as sessao_converters
from filmes_api.models.sessao import Sessao, SessaoCreate


def get_sessao_by_id(*, session: Session, id: int) -> Sessao | None:
    return session.get(Sessao, id)


def get_sessoes(*, session: Session, skip: int, take: int) -> list[Sessao]:
    stmt = select(Sessao).order_by(col(Sessao.id)).offset(skip).limit(take)
    return list(session.exec(stmt).all())


def create_sessao(*, session: Session, sessao_create: SessaoCreate) -> Sessao:
    """
    Add a new session and flush. The caller checks that the movie and the
    cinema exist; a dangling reference surfaces as an IntegrityError here.
    """
    db_obj = sessao_converters.to_model(sessao_create)
    session.add(db_obj)
    session.flush()
    return db_obj


def delete_sessao(*, session: Session, db_sessao: Sessao) -> None:
    session.delete(db_sessao)
    session.flush()
