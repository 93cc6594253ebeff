from fastapi import APIRouter, Request, Response, status

from filmes_api.api.deps import IdPath, SessionDep, SkipQuery, TakeQuery
from filmes_api.core.config import settings
from filmes_api.inputs.patch import PatchOperation
from filmes_api.models.filme import FilmeCreate, FilmeUpdate
from filmes_api.schemas.filme import FilmePublic
from filmes_api.schemas.problem import ValidationProblem
from filmes_api.services import filmes as filmes_service

router = APIRouter(prefix="/Filme", tags=["filmes"])


@router.post(
    "",
    response_model=FilmePublic,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationProblem}},
)
def create_filme(
    *,
    session: SessionDep,
    filme_create: FilmeCreate,
    request: Request,
    response: Response,
) -> FilmePublic:
    """
    Add a movie to the database.
    """
    filme = filmes_service.create_filme(session=session, filme_create=filme_create)
    response.headers["Location"] = str(request.url_for("read_filme", id=filme.id))
    return filme


@router.get("", response_model=list[FilmePublic])
def read_filmes(
    session: SessionDep,
    skip: SkipQuery = 0,
    take: TakeQuery = settings.DEFAULT_TAKE,
) -> list[FilmePublic]:
    """
    List movies, paginated with skip/take.
    """
    return filmes_service.get_filmes(session=session, skip=skip, take=take)


@router.get("/{id}", response_model=FilmePublic)
def read_filme(*, session: SessionDep, id: IdPath) -> FilmePublic:
    return filmes_service.get_filme_by_id(session=session, filme_id=id)


@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ValidationProblem}},
)
def update_filme(
    *,
    session: SessionDep,
    id: IdPath,
    filme_update: FilmeUpdate,
) -> Response:
    """
    Replace every field of an existing movie.
    """
    filmes_service.update_filme(session=session, filme_id=id, filme_update=filme_update)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ValidationProblem}},
)
def patch_filme(
    *,
    session: SessionDep,
    id: IdPath,
    operations: list[PatchOperation],
) -> Response:
    """
    Partially update a movie with a JSON-Patch document. The patched movie
    must still be a valid full update.
    """
    filmes_service.patch_filme(session=session, filme_id=id, operations=operations)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_filme(*, session: SessionDep, id: IdPath) -> Response:
    filmes_service.delete_filme(session=session, filme_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
