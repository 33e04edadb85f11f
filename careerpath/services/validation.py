"""Turns pydantic validation failures into field-level ValidationErrors."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from careerpath.utils.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)

# pydantic error types that mean "the field was left empty"
_MISSING_TYPES = frozenset({"missing", "string_too_short", "too_short"})


def _message(error: dict[str, Any]) -> str:
    message = error.get("msg", "Invalid input")
    return message.removeprefix("Value error, ")


def parse_payload(model_class: type[M], payload: M | dict[str, Any]) -> M:
    """
    Validate a request payload against ``model_class``.

    Raises:
        ValidationError: With the names of the offending top-level fields
    """
    if isinstance(payload, model_class):
        return payload
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be an object")

    try:
        return model_class.model_validate(payload)
    except PydanticValidationError as e:
        errors = e.errors()
        fields: list[str] = []
        for error in errors:
            name = str(error["loc"][0]) if error.get("loc") else "body"
            if name not in fields:
                fields.append(name)

        if all(error["type"] in _MISSING_TYPES for error in errors):
            message = "Missing required fields"
        elif len(errors) == 1:
            message = _message(errors[0])
        else:
            message = "Invalid input"
        raise ValidationError(message, fields=fields) from e
