from fastapi import APIRouter

from filmes_api.api.routes import (
    cinemas,
    enderecos,
    filmes,
    sessoes,
    utils,
)

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(filmes.router)
api_router.include_router(cinemas.router)
api_router.include_router(enderecos.router)
api_router.include_router(sessoes.router)
