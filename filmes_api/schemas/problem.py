from sqlmodel import SQLModel

__all__ = [
    "ValidationProblem",
]


class ValidationProblem(SQLModel):
    type: str = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
    title: str = "One or more validation errors occurred."
    status: int = 400
    errors: dict[str, list[str]]
