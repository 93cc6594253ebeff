from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from filmes_api.api.main import api_router
from filmes_api.core.config import settings
from filmes_api.core.db import init_db
from filmes_api.exceptions.handlers import register_exception_handlers
from filmes_api.logging_ import setup_logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger = setup_logger("api")
    init_db()
    logger.info(f"{settings.PROJECT_NAME} started")
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
register_exception_handlers(app)
app.include_router(api_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    uvicorn.run("filmes_api.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
