"""Error taxonomy for configuration resolution."""

from __future__ import annotations

from dataclasses import dataclass


class SpellConfigError(Exception):
    """Base class for all spellscope configuration errors."""


class MissingPropertyError(SpellConfigError, KeyError):
    """A property was read that is absent and has no default."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Property {self.name!r} is not defined and has no default"


class InvalidPropertyValueError(SpellConfigError, ValueError):
    """A stored value could not be parsed as the property's type."""

    def __init__(self, name: str, value: object, reason: str = ""):
        message = f"Invalid value {value!r} for property {name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.name = name
        self.value = value


class StoreUnavailableError(SpellConfigError):
    """The backing store could not be read (I/O error or corrupt content)."""

    def __init__(self, source: str, reason: str = ""):
        message = f"Configuration store unavailable: {source}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.source = source


class CascadeUsageError(SpellConfigError, ValueError):
    """The cascade was called incorrectly (empty chain, misplaced Global tier, ...)."""


@dataclass(frozen=True)
class Diagnostic:
    """Side-channel report of a tier-local failure absorbed by the cascade."""

    tier: str
    source: str
    message: str
    error: Exception | None = None
