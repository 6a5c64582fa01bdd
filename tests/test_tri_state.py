import pytest

from spellscope.adapters.memory_store import InMemoryPropertyStore
from spellscope.core.errors import CascadeUsageError
from spellscope.core.properties import PropertyNames
from spellscope.core.tiers import ConfigurationTier, ConfigurationType
from spellscope.core.tri_state import (
    PropertyState,
    set_tri_state,
    to_property_state,
    to_property_value,
)

FLAG = PropertyNames.IGNORE_WORDS_WITH_DIGITS


def _tier(kind, values=None):
    return ConfigurationTier(kind, InMemoryPropertyStore(values))


def test_non_global_tier_without_property_is_inherited():
    assert to_property_state(_tier(ConfigurationType.PROJECT), FLAG) == PropertyState.INHERITED


@pytest.mark.parametrize("stored, expected", [(True, PropertyState.YES), (False, PropertyState.NO)])
def test_non_global_tier_reflects_stored_value(stored, expected):
    tier = _tier(ConfigurationType.SOLUTION, {FLAG: stored})
    assert to_property_state(tier, FLAG) == expected


def test_stored_text_values_are_read():
    tier = _tier(ConfigurationType.PROJECT, {FLAG: "False"})
    assert to_property_state(tier, FLAG) == PropertyState.NO


def test_global_tier_never_inherits():
    tier = _tier(ConfigurationType.GLOBAL)
    # Compiled default for IgnoreWordsWithDigits is True
    assert to_property_state(tier, FLAG) == PropertyState.YES
    assert to_property_state(tier, PropertyNames.TREAT_UNDERSCORE_AS_SEPARATOR) == PropertyState.NO


def test_to_property_value():
    assert to_property_value(PropertyState.INHERITED) is None
    assert to_property_value(PropertyState.YES) is True
    assert to_property_value(PropertyState.NO) is False


@pytest.mark.parametrize("state", list(PropertyState))
def test_round_trip_on_non_global_tier(state):
    tier = _tier(ConfigurationType.PROJECT, {FLAG: True})
    set_tri_state(tier, FLAG, state)
    assert to_property_state(tier, FLAG) == state


def test_writing_inherited_removes_property():
    tier = _tier(ConfigurationType.PROJECT, {FLAG: False})
    tier.store.write_scalar(FLAG, to_property_value(PropertyState.INHERITED))
    assert not tier.store.has_property(FLAG)


def test_global_tier_cannot_be_set_to_inherited():
    tier = _tier(ConfigurationType.GLOBAL, {FLAG: False})
    with pytest.raises(CascadeUsageError):
        set_tri_state(tier, FLAG, PropertyState.INHERITED)
    assert tier.store.read_scalar(FLAG) is False
