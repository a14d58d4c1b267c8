#!/usr/bin/env python3
"""
Search Pipeline
===============
Query text in, matched two-syllable dictionary words out.

Pipeline:
    query → validate length → normalize → split letters
          → generate syllables → compound + match → SearchResult
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Container

from .settings import get_setting
from .generator import SyllableGenerator
from .matcher import DictionaryMatcher
from .tones import normalize
from .wordlist import load_wordlist

logger = logging.getLogger(__name__)


def _require_setting(path: str):
    value = get_setting(path)
    if value is None:
        raise ValueError(f"{path} must be set in app.yaml")
    return value


@dataclass
class SearchResult:
    """Outcome of one search."""
    query: str
    normalized: str
    consonants: List[str] = field(default_factory=list)
    vowels: List[str] = field(default_factory=list)
    syllables: int = 0
    words: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.words)

    def rows(self, per_line: Optional[int] = None) -> List[List[str]]:
        """Split matched words into display rows."""
        if per_line is None:
            per_line = _require_setting("search.words_per_line")
        if per_line < 1:
            raise ValueError("per_line must be positive")
        return [self.words[i:i + per_line] for i in range(0, self.total, per_line)]

    def summary(self) -> str:
        if self.total == 0:
            return "Không tìm thấy từ nào."
        return f"Kết quả: {self.total} từ."


def validate_query(query: str) -> Tuple[bool, str]:
    """Check query length against search.min_length/max_length."""
    if query is None:
        return False, "Query cannot be empty"

    query = query.strip()
    min_length = _require_setting("search.min_length")
    max_length = _require_setting("search.max_length")
    if not min_length <= len(query) <= max_length:
        return False, (
            f"Độ dài truy vấn tìm kiếm phải từ {min_length} đến {max_length} ký tự."
        )
    return True, query


def search(query: str,
           wordlist: Optional[Container[str]] = None,
           matcher: Optional[DictionaryMatcher] = None,
           generator: Optional[SyllableGenerator] = None) -> SearchResult:
    """
    Find dictionary words spelled with the letters of a query.

    Args:
        query: Raw query text (tones and spaces allowed)
        wordlist: Dictionary to match against (default: configured word list)
        matcher: Matcher to use (default: configured DictionaryMatcher)
        generator: Syllable generator (default: bundled tables)

    Returns:
        SearchResult with matched words in no particular order

    Raises:
        ValueError: If the query length is out of bounds
        DictionaryUnavailableError: If the word list cannot be loaded
    """
    valid, message = validate_query(query)
    if not valid:
        raise ValueError(message)

    if wordlist is None:
        wordlist = load_wordlist()
    generator = generator or SyllableGenerator()
    matcher = matcher or DictionaryMatcher()

    normalized = normalize(message)
    consonants, vowels = generator.split_letters(normalized)
    syllables = generator.make_syllables(consonants, vowels)
    words = matcher.match(syllables, wordlist)

    logger.info(f"Search '{query}': {len(syllables)} syllables, {len(words)} words")
    return SearchResult(
        query=query,
        normalized=normalized,
        consonants=consonants,
        vowels=vowels,
        syllables=len(syllables),
        words=words,
    )


__all__ = [
    'SearchResult',
    'validate_query',
    'search',
]
