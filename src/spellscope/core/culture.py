"""Culture (language) identifiers and dictionary discovery."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from .errors import InvalidPropertyValueError
from .properties import DEFAULT_LANGUAGE, PropertyNames

# language[-Script][-REGION], e.g. en-US, arn, az-Cyrl, az-Latn-AZ, es-419
_CULTURE_RE = re.compile(
    r"^(?P<lang>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_](?P<region>[A-Za-z]{2}|\d{3}))?$"
)


def normalize_culture(value: object, name: str = PropertyNames.DEFAULT_LANGUAGE) -> str:
    """Return the canonical form of a culture identifier.

    Raises:
        InvalidPropertyValueError: if the value is not a culture identifier
    """
    if not isinstance(value, str):
        raise InvalidPropertyValueError(name, value, "expected a culture name")

    match = _CULTURE_RE.match(value.strip())
    if match is None:
        raise InvalidPropertyValueError(name, value, "not a culture name")

    parts = [match.group("lang").lower()]
    if match.group("script"):
        parts.append(match.group("script").title())
    if match.group("region"):
        parts.append(match.group("region").upper())
    return "-".join(parts)


def is_valid_culture(value: object) -> bool:
    try:
        normalize_culture(value)
    except InvalidPropertyValueError:
        return False
    return True


def available_dictionary_languages(folder: Path | str | None) -> Iterator[str]:
    """Yield the cultures for which a dictionary is available.

    The bundled en-US dictionary always comes first, followed by every
    ``<culture>.aff`` file in ``folder`` that has a matching ``.dic`` file.
    Affix files whose stem is not a culture name are skipped.
    """
    yield DEFAULT_LANGUAGE
    seen = {DEFAULT_LANGUAGE}

    if folder is None:
        return
    folder = Path(folder)
    if not folder.is_dir():
        return

    for affix_file in sorted(folder.glob("*.aff")):
        if not affix_file.with_suffix(".dic").exists():
            continue
        try:
            culture = normalize_culture(affix_file.stem.replace("_", "-"))
        except InvalidPropertyValueError:
            continue
        if culture not in seen:
            seen.add(culture)
            yield culture
