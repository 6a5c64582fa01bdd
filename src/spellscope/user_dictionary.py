"""User dictionary files for spellscope.

Each culture has one plain text file, ``<culture>_User.dic``, in the
configuration folder with one word per line.
"""

import logging
import re
from pathlib import Path
from typing import Iterable

from .config import config

logger = logging.getLogger(__name__)

# Common word break characters used when importing words from arbitrary text
_WORD_BREAK_RE = re.compile(r"[,/<>?;:\"\[\]\\{}|\-=+~!#$%^&*() _.'@\t\r\n]+")


def user_dictionary_path(culture: str, folder: Path | str | None = None) -> Path:
    folder = Path(folder) if folder is not None else config.CONFIG_DIR
    return folder / f"{culture}_User.dic"


def load_user_words(culture: str, folder: Path | str | None = None) -> list[str]:
    """Load the user dictionary for a culture.

    Returns:
        The words in file order; empty if the file does not exist
    """
    path = user_dictionary_path(culture, folder)
    if not path.exists():
        return []
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def save_user_words(culture: str, words: Iterable[str], folder: Path | str | None = None) -> Path:
    """Write the user dictionary sorted and without duplicates."""
    path = user_dictionary_path(culture, folder)
    unique = sorted({word.strip() for word in words if word and word.strip()}, key=str.casefold)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{word}\n" for word in unique), encoding="utf-8")
    logger.debug("Saved %d word(s) to %s", len(unique), path)
    return path


def add_word(culture: str, word: str, folder: Path | str | None = None) -> bool:
    words = load_user_words(culture, folder)
    if not word or not word.strip() or word.strip() in words:
        return False
    words.append(word.strip())
    save_user_words(culture, words, folder)
    return True


def remove_word(culture: str, word: str, folder: Path | str | None = None) -> bool:
    words = load_user_words(culture, folder)
    if word not in words:
        return False
    save_user_words(culture, (w for w in words if w != word), folder)
    return True


def import_words(text: str, existing: Iterable[str] = ()) -> list[str]:
    """Extract new dictionary words from free text.

    Keeps words longer than two characters that contain no digits and are
    not already in ``existing``, in order of first appearance.
    """
    known = set(existing)
    result: list[str] = []
    for word in _WORD_BREAK_RE.split(text):
        if len(word) <= 2 or any(ch.isdigit() for ch in word) or word in known:
            continue
        known.add(word)
        result.append(word)
    return result


def import_file(culture: str, source: Path | str, folder: Path | str | None = None) -> list[str]:
    """Merge the words found in a text or .dic file into the user dictionary.

    Returns:
        The words that were added
    """
    text = Path(source).read_text(encoding="utf-8")
    words = load_user_words(culture, folder)
    added = import_words(text, words)
    if added:
        save_user_words(culture, words + added, folder)
    return added


def export_words(culture: str, destination: Path | str, folder: Path | str | None = None) -> Path:
    destination = Path(destination)
    words = load_user_words(culture, folder)
    destination.write_text("".join(f"{word}\n" for word in words), encoding="utf-8")
    return destination
