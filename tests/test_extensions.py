import pytest

from spellscope.adapters.memory_store import InMemoryPropertyStore
from spellscope.core.errors import CascadeUsageError
from spellscope.core.extensions import (
    format_exclusions,
    normalize_extension,
    parse_exclusions,
    set_exclusions,
)
from spellscope.core.properties import PropertyNames
from spellscope.core.tiers import ConfigurationTier, ConfigurationType


def test_parse_mixed_separators():
    assert parse_exclusions("txt, .md;log") == {".txt", ".md", ".log"}


def test_parse_lone_period_means_no_extension():
    assert parse_exclusions(".") == {"."}


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_parse_blank_is_empty(value):
    assert parse_exclusions(value) == frozenset()


def test_parse_is_case_insensitive():
    assert parse_exclusions("TXT .Md") == {".txt", ".md"}


def test_parse_keeps_underscores_and_digits():
    assert parse_exclusions("mp3 my_ext") == {".mp3", ".my_ext"}


def test_normalize_extension():
    assert normalize_extension("CS") == ".cs"
    assert normalize_extension(".cs") == ".cs"
    assert normalize_extension("") == "."


def test_format_exclusions_sorted():
    assert format_exclusions(parse_exclusions("xml txt .cs")) == ".cs .txt .xml"


def test_set_exclusions_blank_is_written():
    store = InMemoryPropertyStore()
    tier = ConfigurationTier(ConfigurationType.PROJECT, store)
    set_exclusions(tier, "   ")
    assert store.has_property(PropertyNames.EXCLUDE_BY_FILENAME_EXTENSION)
    assert store.read_scalar(PropertyNames.EXCLUDE_BY_FILENAME_EXTENSION) == ""


def test_set_exclusions_none_inherits():
    store = InMemoryPropertyStore({PropertyNames.EXCLUDE_BY_FILENAME_EXTENSION: ".txt"})
    set_exclusions(ConfigurationTier(ConfigurationType.PROJECT, store), None)
    assert not store.has_property(PropertyNames.EXCLUDE_BY_FILENAME_EXTENSION)


def test_set_exclusions_global_cannot_inherit():
    tier = ConfigurationTier(ConfigurationType.GLOBAL, InMemoryPropertyStore())
    with pytest.raises(CascadeUsageError):
        set_exclusions(tier, None)
