"""Request validation utilities."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from fillthis.models.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Reduce pydantic validation errors to field/message pairs.

    Drops internal fields such as ``url``, ``ctx`` and ``input``.
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "request"
        msg = err.get("msg", "Invalid value").replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "greater than or equal to 0" in msg_lower:
            msg = "Must be a non-negative integer"
        elif "field required" in msg_lower:
            msg = "This field is required"
        elif "valid integer" in msg_lower or "valid boolean" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_request(model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """Validate request data against a pydantic model.

    Args:
        model: Pydantic model class
        data: Input data to validate

    Returns:
        The validated model instance

    Raises:
        ValidationError: If any field is invalid
        InvalidFormatError: If the requested format is not supported
    """
    try:
        return model(**data)
    except PydanticValidationError as exc:
        raise ValidationError(
            message="Invalid image request",
            details={"errors": sanitize_validation_errors(exc.errors())},
        ) from exc
