from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.exceptions import ValidationError


def is_provided(value: Any) -> bool:
    """Truthy presence check; whitespace-only strings count as missing."""
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def missing_fields(payload: Mapping[str, Any], required: Sequence[str]) -> list[str]:
    return [name for name in required if not is_provided(payload.get(name))]


def clean_text(value: Any, field_name: str, *, max_length: int) -> str:
    """Strip a text field; plain integers are accepted (e.g. numeric employee IDs)."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(f"Invalid {field_name}")
    v = str(value).strip()
    if len(v) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return v


def optional_text(value: Any, field_name: str, *, max_length: int) -> Optional[str]:
    if value is None:
        return None
    v = clean_text(value, field_name, max_length=max_length)
    return v or None
