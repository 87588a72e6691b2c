from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    """Reject blank values. The value is returned as given, untrimmed."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required.")
    return str(value)


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip()
