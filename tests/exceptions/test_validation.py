import pytest
from pydantic import ValidationError

from filmes_api.exceptions.validation import ValidationProblemError, errors_from_pydantic
from filmes_api.models.filme import FilmeUpdate


def test_errors_from_pydantic_groups_by_field():
    with pytest.raises(ValidationError) as excinfo:
        FilmeUpdate.model_validate({"titulo": "", "genero": "Drama", "duracao": 1000})

    errors = errors_from_pydantic(excinfo.value.errors())

    assert set(errors) == {"titulo", "duracao"}
    assert all(len(messages) == 1 for messages in errors.values())


def test_errors_from_pydantic_strips_request_location():
    errors = errors_from_pydantic(
        [
            {"loc": ("body", "titulo"), "msg": "Field required"},
            {"loc": ("query", "take"), "msg": "too small"},
            {"loc": ("body", "titulo"), "msg": "another"},
            {"loc": ("body",), "msg": "Invalid JSON"},
        ]
    )

    assert errors == {
        "titulo": ["Field required", "another"],
        "take": ["too small"],
        "": ["Invalid JSON"],
    }


def test_validation_problem_error():
    error = ValidationProblemError({"titulo": ["required"]})

    assert error.status_code == 400
    assert error.errors == {"titulo": ["required"]}
