from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from filmes_api.schemas.problem import ValidationProblem

from .base import AppError
from .validation import ValidationProblemError, errors_from_pydantic


def _problem_response(errors: dict[str, list[str]]) -> JSONResponse:
    problem = ValidationProblem(errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(),
    )


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(ValidationProblemError)
    async def validation_problem_handler(_: Request, exc: ValidationProblemError):
        logger.warning(f" 400 Error: {exc.detail} {exc.errors}")
        return _problem_response(exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_: Request, exc: RequestValidationError):
        errors = errors_from_pydantic(exc.errors())
        logger.warning(f" 400 Error: invalid request {errors}")
        return _problem_response(errors)

    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError):
        logger.warning(f" {exc.status_code} Error: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(Exception)
    async def generic_exception_handler(_: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled error while processing request")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred."},
        )
