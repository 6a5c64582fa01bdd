"""Core configuration model (resolved, immutable view)."""

from __future__ import annotations

from dataclasses import dataclass, field

from .extensions import format_exclusions, normalize_extension
from .properties import (
    DEFAULT_IGNORED_WORDS,
    DEFAULT_IGNORED_XML_ELEMENTS,
    DEFAULT_LANGUAGE,
    DEFAULT_SPELL_CHECKED_ATTRIBUTES,
    IgnoredCharacterClass,
)


@dataclass(frozen=True)
class CSharpOptions:
    ignore_xml_doc_comments: bool = False
    ignore_delimited_comments: bool = False
    ignore_standard_single_line_comments: bool = False
    ignore_quadruple_slash_comments: bool = False
    ignore_normal_strings: bool = False
    ignore_verbatim_strings: bool = False


@dataclass(frozen=True)
class EffectiveConfiguration:
    """Fully resolved settings for one document.

    The two query methods only look at the snapshot, so they are safe to
    call from any thread on every word.
    """

    default_language: str = DEFAULT_LANGUAGE
    spell_check_as_you_type: bool = True
    ignore_words_with_digits: bool = True
    ignore_words_in_all_uppercase: bool = True
    ignore_format_specifiers: bool = True
    ignore_filenames_and_email_addresses: bool = True
    ignore_xml_elements_in_text: bool = True
    treat_underscore_as_separator: bool = False
    ignore_character_class: IgnoredCharacterClass = IgnoredCharacterClass.NONE
    ignored_words: frozenset[str] = frozenset(DEFAULT_IGNORED_WORDS)
    ignored_xml_elements: frozenset[str] = frozenset(DEFAULT_IGNORED_XML_ELEMENTS)
    spell_checked_xml_attributes: frozenset[str] = frozenset(DEFAULT_SPELL_CHECKED_ATTRIBUTES)
    extension_exclusions: frozenset[str] = frozenset()
    csharp_options: CSharpOptions = field(default_factory=CSharpOptions)
    _ignored_word_keys: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "extension_exclusions",
            frozenset(normalize_extension(ext) for ext in self.extension_exclusions),
        )
        object.__setattr__(
            self, "_ignored_word_keys", frozenset(word.casefold() for word in self.ignored_words)
        )

    @property
    def exclude_by_filename_extension(self) -> str:
        return format_exclusions(self.extension_exclusions)

    def is_extension_excluded(self, extension: str | None) -> bool:
        if extension is None:
            return False
        return normalize_extension(extension) in self.extension_exclusions

    def should_ignore_word(self, word: str | None) -> bool:
        if word is None or not word.strip():
            return True
        return word.casefold() in self._ignored_word_keys
