from fastapi import APIRouter, Request, Response, status

from filmes_api.api.deps import IdPath, SessionDep, SkipQuery, TakeQuery
from filmes_api.core.config import settings
from filmes_api.models.sessao import SessaoCreate
from filmes_api.schemas.sessao import SessaoPublic
from filmes_api.services import sessoes as sessoes_service

router = APIRouter(prefix="/Sessao", tags=["sessoes"])


@router.post("", response_model=SessaoPublic, status_code=status.HTTP_201_CREATED)
def create_sessao(
    *,
    session: SessionDep,
    sessao_create: SessaoCreate,
    request: Request,
    response: Response,
) -> SessaoPublic:
    sessao = sessoes_service.create_sessao(session=session, sessao_create=sessao_create)
    response.headers["Location"] = str(request.url_for("read_sessao", id=sessao.id))
    return sessao


@router.get("", response_model=list[SessaoPublic])
def read_sessoes(
    session: SessionDep,
    skip: SkipQuery = 0,
    take: TakeQuery = settings.DEFAULT_TAKE,
) -> list[SessaoPublic]:
    return sessoes_service.get_sessoes(session=session, skip=skip, take=take)


@router.get("/{id}", response_model=SessaoPublic)
def read_sessao(*, session: SessionDep, id: IdPath) -> SessaoPublic:
    return sessoes_service.get_sessao_by_id(session=session, sessao_id=id)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sessao(*, session: SessionDep, id: IdPath) -> Response:
    sessoes_service.delete_sessao(session=session, sessao_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
