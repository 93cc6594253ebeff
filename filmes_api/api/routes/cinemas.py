from fastapi import APIRouter, Request, Response, status

from filmes_api.api.deps import IdPath, SessionDep, SkipQuery, TakeQuery
from filmes_api.core.config import settings
from filmes_api.models.cinema import CinemaCreate, CinemaUpdate
from filmes_api.schemas.cinema import CinemaPublic
from filmes_api.services import cinemas as cinemas_service

router = APIRouter(prefix="/Cinema", tags=["cinemas"])


@router.post("", response_model=CinemaPublic, status_code=status.HTTP_201_CREATED)
def create_cinema(
    *,
    session: SessionDep,
    cinema_create: CinemaCreate,
    request: Request,
    response: Response,
) -> CinemaPublic:
    cinema = cinemas_service.create_cinema(session=session, cinema_create=cinema_create)
    response.headers["Location"] = str(request.url_for("read_cinema", id=cinema.id))
    return cinema


@router.get("", response_model=list[CinemaPublic])
def read_cinemas(
    session: SessionDep,
    skip: SkipQuery = 0,
    take: TakeQuery = settings.DEFAULT_TAKE,
) -> list[CinemaPublic]:
    return cinemas_service.get_cinemas(session=session, skip=skip, take=take)


@router.get("/{id}", response_model=CinemaPublic)
def read_cinema(*, session: SessionDep, id: IdPath) -> CinemaPublic:
    return cinemas_service.get_cinema_by_id(session=session, cinema_id=id)


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def update_cinema(
    *,
    session: SessionDep,
    id: IdPath,
    cinema_update: CinemaUpdate,
) -> Response:
    cinemas_service.update_cinema(
        session=session,
        cinema_id=id,
        cinema_update=cinema_update,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cinema(*, session: SessionDep, id: IdPath) -> Response:
    cinemas_service.delete_cinema(session=session, cinema_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
