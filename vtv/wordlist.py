#!/usr/bin/env python3
"""
Word List
=========
Read-only dictionary of Vietnamese words and phrases used as the
membership oracle for candidate phrases.

The file format is plain UTF-8 text, one entry per line (e.g. Viet39K.txt).
Entries are NFC-normalized so that decomposed input still matches the
precomposed candidates produced by the generator.
"""

import logging
import unicodedata
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Optional

from .settings import get_setting, resolve_path

logger = logging.getLogger(__name__)


class DictionaryUnavailableError(RuntimeError):
    """The word list could not be loaded; no search can run without it."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class Wordlist:
    """
    Immutable set of dictionary entries.

    Usage:
        wordlist = Wordlist(["ba", "ba an", "tiếng việt"])
        "ba an" in wordlist        # True
        wordlist.phrases           # frozenset({'ba an', 'tiếng việt'})
    """

    def __init__(self, entries: Iterable[str]):
        cleaned = (unicodedata.normalize("NFC", e.strip()) for e in entries)
        self._entries: FrozenSet[str] = frozenset(e for e in cleaned if e)

    def __contains__(self, item) -> bool:
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def words(self) -> FrozenSet[str]:
        """Single-syllable entries."""
        return frozenset(e for e in self._entries if ' ' not in e)

    @property
    def phrases(self) -> FrozenSet[str]:
        """Two-syllable entries."""
        return frozenset(e for e in self._entries if e.count(' ') == 1)


@lru_cache(maxsize=4)
def _read_wordlist(path: Path) -> Wordlist:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            wordlist = Wordlist(f)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnavailableError(
            f"Cannot read word list {path}: {e}", path=path
        ) from e

    logger.info(f"Loaded {len(wordlist)} entries from {path}")
    return wordlist


def load_wordlist(path=None) -> Wordlist:
    """
    Load a word list file.

    Args:
        path: File path (default: wordlist.path in app.yaml)

    Returns:
        Wordlist, cached per resolved path

    Raises:
        DictionaryUnavailableError: If the file is missing or unreadable
    """
    if path is None:
        path = get_setting("wordlist.path")
    if path is None:
        raise DictionaryUnavailableError("wordlist.path must be set in app.yaml")

    resolved = resolve_path(path)
    if not resolved.is_file():
        raise DictionaryUnavailableError(f"Word list not found: {resolved}", path=resolved)
    return _read_wordlist(resolved)


__all__ = [
    'DictionaryUnavailableError',
    'Wordlist',
    'load_wordlist',
]
