from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "PatchOperation",
    "PatchError",
    "apply_patch",
]


class PatchOperation(BaseModel):
    """A single JSON-Patch (RFC 6902) operation against a flat document."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "copy", "move", "test"]
    path: str = Field(examples=["/titulo"])
    value: Any = None
    from_: str | None = Field(default=None, alias="from")


class PatchError(Exception):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def _resolve_field(pointer: str, fields: set[str]) -> str:
    if not pointer.startswith("/"):
        raise PatchError(pointer, f"The path '{pointer}' is not a valid JSON pointer.")

    # RFC 6901 escaping
    name = pointer[1:].replace("~1", "/").replace("~0", "~")
    if name not in fields:
        raise PatchError(
            name or pointer,
            f"The target location specified by path segment '{name}' was not found.",
        )
    return name


def _require_value(operation: PatchOperation, field: str) -> Any:
    if "value" not in operation.model_fields_set:
        raise PatchError(field, f"The '{operation.op}' operation requires a value.")
    return operation.value


def _json_equal(current: Any, expected: Any) -> bool:
    # JSON types must match; true is not 1, but 115 and 115.0 are the same number
    if isinstance(current, bool) or isinstance(expected, bool):
        return type(current) is type(expected) and current == expected
    if isinstance(current, int | float) and isinstance(expected, int | float):
        return current == expected
    if isinstance(current, list) and isinstance(expected, list):
        return len(current) == len(expected) and all(
            _json_equal(a, b) for a, b in zip(current, expected)
        )
    if isinstance(current, dict) and isinstance(expected, dict):
        return current.keys() == expected.keys() and all(
            _json_equal(current[key], expected[key]) for key in current
        )
    return type(current) is type(expected) and current == expected


def apply_patch(
    document: Mapping[str, Any],
    operations: Sequence[PatchOperation],
) -> dict[str, Any]:
    """
    Apply patch operations to a copy of a flat document, in order.

    Only top level members can be addressed. `remove` clears a member to None,
    leaving it to schema validation to decide whether that is allowed.

    Parameters:
        document (Mapping[str, Any]): The current state, e.g. a dumped update schema.
        operations (Sequence[PatchOperation]): The operations to apply.
    Returns:
        dict[str, Any]: The patched copy. The input document is left untouched.
    Raises:
        PatchError: If an operation addresses an unknown member, lacks a
            required value or source, or a `test` operation does not match.
    """
    patched = dict(document)
    fields = set(patched)

    for operation in operations:
        field = _resolve_field(operation.path, fields)

        if operation.op in ("add", "replace"):
            patched[field] = _require_value(operation, field)

        elif operation.op == "remove":
            patched[field] = None

        elif operation.op in ("copy", "move"):
            if operation.from_ is None:
                raise PatchError(
                    field, f"The '{operation.op}' operation requires a 'from' location."
                )
            source = _resolve_field(operation.from_, fields)
            value = patched[source]
            if operation.op == "move":
                patched[source] = None
            patched[field] = value

        elif operation.op == "test":
            expected = _require_value(operation, field)
            if not _json_equal(patched[field], expected):
                raise PatchError(
                    field,
                    f"The current value '{patched[field]}' at path '{field}' "
                    f"is not equal to the test value '{expected}'.",
                )

    return patched
