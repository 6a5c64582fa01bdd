"""Tri-state (Inherited/Yes/No) view of boolean properties."""

from __future__ import annotations

from enum import Enum, auto

from .errors import CascadeUsageError
from .properties import DEFAULTS
from .tiers import ConfigurationTier
from .values import to_bool


class PropertyState(Enum):
    INHERITED = auto()
    YES = auto()
    NO = auto()


def to_property_state(tier: ConfigurationTier, name: str) -> PropertyState:
    """Return the state of a boolean property as defined by one tier.

    A non-global tier that does not define the property inherits it. The
    global tier always has a value, the compiled default when absent.
    """
    store = tier.store
    if not store.has_property(name):
        if not tier.is_global:
            return PropertyState.INHERITED
        value = DEFAULTS[name]
    else:
        value = to_bool(name, store.read_scalar(name))
    return PropertyState.YES if value else PropertyState.NO


def to_property_value(state: PropertyState) -> bool | None:
    """Convert a state to the value to store; ``None`` means remove the property."""
    if state is PropertyState.INHERITED:
        return None
    return state is PropertyState.YES


def set_tri_state(tier: ConfigurationTier, name: str, state: PropertyState) -> None:
    if tier.is_global and state is PropertyState.INHERITED:
        raise CascadeUsageError(f"Global tier cannot inherit {name}")
    tier.store.write_scalar(name, to_property_value(state))
