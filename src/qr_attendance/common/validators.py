from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_password(value: Any, field_name: str = "Password") -> str:
    # passwords are taken verbatim, surrounding spaces included
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{field_name} is required")
    return value


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def require_fields(payload: Mapping[str, Any], *field_names: str, message: str | None = None) -> tuple[str, ...]:
    """Pull required string fields out of a JSON body, in the given order."""
    values = []
    for name in field_names:
        value = payload.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(message or f"{name} is required")
        values.append(value.strip())
    return tuple(values)
