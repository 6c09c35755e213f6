from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_positive_id(value: object, field_name: str) -> int:
    try:
        parsed = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer id")
    if parsed <= 0:
        raise ValidationError(f"{field_name} must be a positive id")
    return parsed


def require_enum(value: object, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def require_choice(value: Optional[str], choices: Iterable[str], field_name: str) -> str:
    allowed = list(choices)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value
