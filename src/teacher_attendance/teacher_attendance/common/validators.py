from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..core.exceptions import ValidationError


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def require_fields(payload: Mapping[str, Any], fields: Sequence[str], *, message: Optional[str] = None) -> None:
    """Raise ValidationError listing every missing field, in declared order."""
    missing = [f for f in fields if not is_present(payload.get(f))]
    if missing:
        raise ValidationError(missing, message)


def require_any(payload: Mapping[str, Any], fields: Sequence[str], *, message: Optional[str] = None) -> None:
    if not any(is_present(payload.get(f)) for f in fields):
        raise ValidationError(fields, message)


def require_non_empty(value: Optional[str], field_name: str, *, message: Optional[str] = None) -> str:
    if not is_present(value):
        raise ValidationError([field_name], message)
    return str(value).strip()
