from __future__ import annotations

from ..core.exceptions import EmptyNameError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise EmptyNameError(f"{field_name} must not be empty")
    return value.strip()
