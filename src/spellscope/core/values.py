"""Conversion of raw stored values to property types.

Stores may hand back native Python values (in-memory store) or text
(file-backed stores), so every conversion accepts both.
"""

from __future__ import annotations

from enum import Enum

from .errors import InvalidPropertyValueError

_TRUE = {"true", "yes", "1"}
_FALSE = {"false", "no", "0"}


def to_bool(name: str, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise InvalidPropertyValueError(name, raw, "expected a boolean")


def to_enum(name: str, raw: object, enum_type: type[Enum]) -> Enum:
    if isinstance(raw, enum_type):
        return raw
    if isinstance(raw, str):
        text = raw.strip().lower()
        for member in enum_type:
            if text in (str(member.value).lower(), member.name.lower()):
                return member
    raise InvalidPropertyValueError(name, raw, f"expected one of {[m.value for m in enum_type]}")


def to_text(name: str, raw: object) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bool, int, float)):
        return str(raw)
    raise InvalidPropertyValueError(name, raw, "expected text")


def to_stored_text(value: object) -> str:
    """Render a property value the way file-backed stores persist it."""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
