"""Core ports (interfaces) for spellscope.

These protocols define the boundaries between the configuration core and
the collaborators around it: the stores backing each tier, the host that
knows which tiers apply to a document, and whoever wants to hear about
tiers that could not be read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from .document import DocumentIdentity
    from .errors import Diagnostic
    from .tiers import ConfigurationTier


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


@runtime_checkable
class PropertyStore(Protocol):
    """Key/value storage behind one configuration tier.

    A property that is present with its default value must stay
    distinguishable from an absent one.
    """

    source: str

    def has_property(self, name: str) -> bool:
        """Return True if the store defines the property."""

    def read_scalar(self, name: str, default: object = MISSING) -> object:
        """Return the raw value; raise MissingPropertyError if absent and no default."""

    def read_list(self, name: str, item_tag: str) -> list[str]:
        """Return the items of a list property, empty if absent."""

    def write_scalar(self, name: str, value: object | None) -> None:
        """Store a value; None removes the property."""

    def write_list(
        self, name: str, items: Iterable[str] | None, item_tag: str | None = None
    ) -> None:
        """Store a list property under the given item tag; None removes it."""


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives reports of tier failures absorbed during resolution."""

    def report(self, diagnostic: "Diagnostic") -> None:
        """Record a diagnostic. Must not raise."""


@runtime_checkable
class TierProvider(Protocol):
    """Supplies the tiers that govern a document, global first."""

    def tiers_for(self, document: "DocumentIdentity") -> Sequence["ConfigurationTier"]:
        """Return the ordered tier chain for the document."""


@runtime_checkable
class DictionaryFactory(Protocol):
    """Builds or reuses a language dictionary for a culture."""

    def __call__(self, culture: str) -> object | None:
        """Return a dictionary for the culture or None if unavailable."""
