"""Configuration tiers and tier chains."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .errors import CascadeUsageError
from .ports import PropertyStore


class ConfigurationType(Enum):
    GLOBAL = 0
    SOLUTION = 1
    PROJECT = 2
    FOLDER = 3
    FILE = 4


@dataclass(frozen=True, eq=False)
class ConfigurationTier:
    """One configuration source and the store backing it."""

    kind: ConfigurationType
    store: PropertyStore

    @property
    def is_global(self) -> bool:
        return self.kind is ConfigurationType.GLOBAL

    @property
    def label(self) -> str:
        return f"{self.kind.name.lower()}:{getattr(self.store, 'source', type(self.store).__name__)}"


def validate_chain(tiers: Iterable[ConfigurationTier]) -> tuple[ConfigurationTier, ...]:
    """Check that ``tiers`` runs from Global to the most specific tier.

    Raises:
        CascadeUsageError: empty chain, Global missing or not first, or tiers
            listed out of order
    """
    chain = tuple(tiers)
    if not chain:
        raise CascadeUsageError("Cannot resolve configuration from an empty tier chain")
    if not chain[0].is_global:
        raise CascadeUsageError(f"First tier must be global, got {chain[0].kind.name.lower()}")

    previous = chain[0].kind
    for tier in chain[1:]:
        if tier.is_global:
            raise CascadeUsageError("Only one global tier is allowed in a chain")
        # Nested folders may repeat, anything else must move toward the file
        if tier.kind.value < previous.value or (
            tier.kind is previous and tier.kind is not ConfigurationType.FOLDER
        ):
            raise CascadeUsageError(
                f"Tier {tier.kind.name.lower()} cannot follow {previous.name.lower()}"
            )
        previous = tier.kind
    return chain
