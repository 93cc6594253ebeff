from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any

from fastapi import status

from .base import AppError

# Leading loc entries FastAPI adds to say where a value came from
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class ValidationProblemError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "One or more validation errors occurred."

    def __init__(self, errors: Mapping[str, list[str]]):
        self.errors = dict(errors)
        super().__init__()


def errors_from_pydantic(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """
    Group pydantic error entries by field name.

    Parameters:
        errors (Iterable[Mapping]): Entries as returned by ValidationError.errors()
            or RequestValidationError.errors().
    Returns:
        dict[str, list[str]]: Messages keyed by the dotted field location. Errors
            that are not tied to a field are keyed by an empty string.
    """
    grouped: dict[str, list[str]] = defaultdict(list)
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc)
        grouped[field].append(str(error.get("msg", "Invalid value")))
    return dict(grouped)
