from fastapi import APIRouter, Request, Response, status

from filmes_api.api.deps import IdPath, SessionDep, SkipQuery, TakeQuery
from filmes_api.core.config import settings
from filmes_api.models.endereco import EnderecoCreate, EnderecoUpdate
from filmes_api.schemas.endereco import EnderecoPublic
from filmes_api.services import enderecos as enderecos_service

router = APIRouter(prefix="/Endereco", tags=["enderecos"])


@router.post("", response_model=EnderecoPublic, status_code=status.HTTP_201_CREATED)
def create_endereco(
    *,
    session: SessionDep,
    endereco_create: EnderecoCreate,
    request: Request,
    response: Response,
) -> EnderecoPublic:
    endereco = enderecos_service.create_endereco(
        session=session,
        endereco_create=endereco_create,
    )
    response.headers["Location"] = str(
        request.url_for("read_endereco", id=endereco.id)
    )
    return endereco


@router.get("", response_model=list[EnderecoPublic])
def read_enderecos(
    session: SessionDep,
    skip: SkipQuery = 0,
    take: TakeQuery = settings.DEFAULT_TAKE,
) -> list[EnderecoPublic]:
    return enderecos_service.get_enderecos(session=session, skip=skip, take=take)


@router.get("/{id}", response_model=EnderecoPublic)
def read_endereco(*, session: SessionDep, id: IdPath) -> EnderecoPublic:
    return enderecos_service.get_endereco_by_id(session=session, endereco_id=id)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def update_endereco(
    *,
    session: SessionDep,
    id: IdPath,
    endereco_update: EnderecoUpdate,
) -> Response:
    enderecos_service.update_endereco(
        session=session,
        endereco_id=id,
        endereco_update=endereco_update,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_endereco(*, session: SessionDep, id: IdPath) -> Response:
    enderecos_service.delete_endereco(session=session, endereco_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
