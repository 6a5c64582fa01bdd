"""Configuration cascade.

Walks a tier chain from the most specific tier toward the global one and
produces one EffectiveConfiguration. Scalars and sets both use override
semantics: the most specific tier that defines a property supplies the
whole value. A tier that cannot be read degrades the entire resolution to
the compiled defaults and is reported through the diagnostic sink.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from .config_model import CSharpOptions, EffectiveConfiguration
from .culture import normalize_culture
from .errors import Diagnostic, InvalidPropertyValueError, StoreUnavailableError
from .extensions import parse_exclusions
from .ports import DiagnosticSink
from .properties import DEFAULTS, IgnoredCharacterClass, PropertyNames, SET_PROPERTIES
from .tiers import ConfigurationTier, validate_chain
from .values import to_bool, to_enum, to_text

logger = logging.getLogger(__name__)


class _TierReadFailure(Exception):
    def __init__(self, tier: ConfigurationTier, cause: Exception):
        super().__init__(str(cause))
        self.tier = tier
        self.cause = cause


def _dedupe(items: Iterable[str], case_insensitive: bool) -> frozenset[str]:
    if not case_insensitive:
        return frozenset(items)
    kept: dict[str, str] = {}
    for item in items:
        kept.setdefault(item.casefold(), item)
    return frozenset(kept.values())


class ConfigurationCascade:
    """Resolves effective configuration from an ordered tier chain.

    Holds no per-resolution state, so one instance can serve concurrent
    resolutions for different documents.
    """

    def __init__(self, diagnostics: DiagnosticSink | None = None):
        self._diagnostics = diagnostics

    def resolve(self, tiers: Iterable[ConfigurationTier]) -> EffectiveConfiguration:
        """Resolve the chain (global first) into an EffectiveConfiguration.

        Raises:
            CascadeUsageError: if the chain is empty or badly ordered
        """
        chain = validate_chain(tiers)
        try:
            config = self._resolve(chain)
        except _TierReadFailure as failure:
            self._report(failure.tier, "Unable to read configuration, using defaults", failure.cause)
            return EffectiveConfiguration()

        logger.debug("Resolved configuration from %d tier(s): %s", len(chain), config)
        return config

    def _resolve(self, chain: tuple[ConfigurationTier, ...]) -> EffectiveConfiguration:
        def flag(name: str) -> bool:
            return self._scalar(chain, name, to_bool)

        sets = {
            name: self._set(chain, name, item_tag, case_insensitive)
            for name, item_tag, case_insensitive in SET_PROPERTIES
        }

        return EffectiveConfiguration(
            default_language=self._scalar(
                chain, PropertyNames.DEFAULT_LANGUAGE, lambda name, raw: normalize_culture(raw, name)
            ),
            spell_check_as_you_type=flag(PropertyNames.SPELL_CHECK_AS_YOU_TYPE),
            ignore_words_with_digits=flag(PropertyNames.IGNORE_WORDS_WITH_DIGITS),
            ignore_words_in_all_uppercase=flag(PropertyNames.IGNORE_WORDS_IN_ALL_UPPERCASE),
            ignore_format_specifiers=flag(PropertyNames.IGNORE_FORMAT_SPECIFIERS),
            ignore_filenames_and_email_addresses=flag(
                PropertyNames.IGNORE_FILENAMES_AND_EMAIL_ADDRESSES
            ),
            ignore_xml_elements_in_text=flag(PropertyNames.IGNORE_XML_ELEMENTS_IN_TEXT),
            treat_underscore_as_separator=flag(PropertyNames.TREAT_UNDERSCORE_AS_SEPARATOR),
            ignore_character_class=self._scalar(
                chain,
                PropertyNames.IGNORE_CHARACTER_CLASS,
                lambda name, raw: to_enum(name, raw, IgnoredCharacterClass),
            ),
            ignored_words=sets[PropertyNames.IGNORED_WORDS],
            ignored_xml_elements=sets[PropertyNames.IGNORED_XML_ELEMENTS],
            spell_checked_xml_attributes=sets[PropertyNames.SPELL_CHECKED_XML_ATTRIBUTES],
            extension_exclusions=parse_exclusions(
                self._scalar(chain, PropertyNames.EXCLUDE_BY_FILENAME_EXTENSION, to_text)
            ),
            csharp_options=CSharpOptions(
                ignore_xml_doc_comments=flag(PropertyNames.CSHARP_IGNORE_XML_DOC_COMMENTS),
                ignore_delimited_comments=flag(PropertyNames.CSHARP_IGNORE_DELIMITED_COMMENTS),
                ignore_standard_single_line_comments=flag(
                    PropertyNames.CSHARP_IGNORE_STANDARD_SINGLE_LINE_COMMENTS
                ),
                ignore_quadruple_slash_comments=flag(
                    PropertyNames.CSHARP_IGNORE_QUADRUPLE_SLASH_COMMENTS
                ),
                ignore_normal_strings=flag(PropertyNames.CSHARP_IGNORE_NORMAL_STRINGS),
                ignore_verbatim_strings=flag(PropertyNames.CSHARP_IGNORE_VERBATIM_STRINGS),
            ),
        )

    def _scalar(
        self,
        chain: tuple[ConfigurationTier, ...],
        name: str,
        convert: Callable[[str, object], object],
    ):
        for tier in reversed(chain):
            if not self._read(tier, tier.store.has_property, name):
                continue
            raw = self._read(tier, tier.store.read_scalar, name)
            try:
                return convert(name, raw)
            except InvalidPropertyValueError as ex:
                # Treated as not defined by this tier
                self._report(tier, f"Ignoring invalid value for {name}", ex)
        return DEFAULTS[name]

    def _set(
        self,
        chain: tuple[ConfigurationTier, ...],
        name: str,
        item_tag: str,
        case_insensitive: bool,
    ) -> frozenset[str]:
        for tier in reversed(chain):
            if self._read(tier, tier.store.has_property, name):
                items = self._read(tier, tier.store.read_list, name, item_tag)
                return _dedupe(items, case_insensitive)
        return _dedupe(DEFAULTS[name], case_insensitive)

    @staticmethod
    def _read(tier: ConfigurationTier, reader, *args):
        try:
            return reader(*args)
        except (StoreUnavailableError, OSError) as ex:
            raise _TierReadFailure(tier, ex) from ex

    def _report(self, tier: ConfigurationTier, message: str, error: Exception | None) -> None:
        diagnostic = Diagnostic(
            tier=tier.kind.name.lower(),
            source=getattr(tier.store, "source", type(tier.store).__name__),
            message=message,
            error=error,
        )
        if self._diagnostics is None:
            logger.warning("%s [%s %s]: %s", message, diagnostic.tier, diagnostic.source, error)
            return
        try:
            self._diagnostics.report(diagnostic)
        except Exception:
            logger.exception("Diagnostic sink failed while reporting %s", diagnostic)
