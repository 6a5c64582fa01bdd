"""Filename extension exclusion sets.

Extensions are given as one string, separated by any character that is
neither a period nor a word character, with or without a leading period.
A lone period stands for files without an extension.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .errors import CascadeUsageError
from .properties import PropertyNames

if TYPE_CHECKING:
    from .tiers import ConfigurationTier

_SPLIT_RE = re.compile(r"[^.\w]")


def normalize_extension(extension: str) -> str:
    if not extension or extension[0] != ".":
        extension = "." + extension
    return extension.casefold()


def parse_exclusions(value: str | None) -> frozenset[str]:
    if value is None or not value.strip():
        return frozenset()
    return frozenset(normalize_extension(part) for part in _SPLIT_RE.split(value) if part)


def format_exclusions(exclusions) -> str:
    return " ".join(sorted(exclusions))


def set_exclusions(tier: "ConfigurationTier", value: str | None) -> None:
    """Store the exclusion text on a tier; ``None`` makes it inherited.

    Text is written even when blank so a lower tier can switch off
    exclusions configured further up the chain.
    """
    if value is None and tier.is_global:
        raise CascadeUsageError("Global tier cannot inherit extension exclusions")
    tier.store.write_scalar(
        PropertyNames.EXCLUDE_BY_FILENAME_EXTENSION, None if value is None else value.strip()
    )
