"""Validation of client payloads against insert and update shapes."""

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic

from studyhub.exceptions import ValidationError

ShapeT = TypeVar("ShapeT", bound=pydantic.BaseModel)


def parse_payload(shape: type[ShapeT], payload: ShapeT | Mapping[str, Any]) -> ShapeT:
    """
    Validate a payload against an entity shape.

    Keys outside the shape (server-assigned ids, counters, timestamps) are
    dropped. Runs before any store access.

    Args:
        shape: The insert or update schema to validate against
        payload: An instance of ``shape`` or a plain mapping

    Returns:
        Validated instance of ``shape``

    Raises:
        ValidationError: If a field is missing, has the wrong type or an
            invalid enum value
    """
    if isinstance(payload, shape):
        return payload
    if isinstance(payload, pydantic.BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    if not isinstance(payload, Mapping):
        raise ValidationError(f"{shape.__name__} payload must be an object")
    try:
        return shape.model_validate(dict(payload))
    except pydantic.ValidationError as e:
        errors = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in e.errors()
        ]
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in errors)
        raise ValidationError(f"Invalid {shape.__name__}: {fields}", errors=errors) from e


def update_changes(update: pydantic.BaseModel) -> dict[str, Any]:
    """
    Fields explicitly set on a partial update.

    An explicit ``None`` is kept only for nullable columns; for required
    columns it means "leave unchanged".
    """
    nullable: frozenset[str] = getattr(update, "nullable_fields", frozenset())
    return {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key in nullable
    }
