#!/usr/bin/env python3
"""
Parallel Dictionary Matcher
===========================
Cross-products candidate syllables into two-word phrases and keeps the
ones present in the word list.

The phrase set is the full Cartesian square of the candidates, which is
the dominant cost of a search, so checks run in batches on a thread
pool. Each batch collects its matches locally; the shared result list is
extended once per batch under a lock.

Usage:
    from vtv.matcher import DictionaryMatcher, MatcherConfig

    matcher = DictionaryMatcher(MatcherConfig(max_workers=4, batch_size=1000))
    matcher.match(["ba", "an"], {"ba an"})   # ['ba an']
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from itertools import islice
from typing import Optional, Iterator, Iterable, List, Container, Sequence
import logging

from .settings import get_setting
from .wordlist import DictionaryUnavailableError

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class MatcherConfig:
    """Configuration for parallel matching."""
    max_workers: Optional[int] = None    # Threads checking phrases
    batch_size: Optional[int] = None     # Phrases per submitted task

    def __post_init__(self):
        cfg = get_setting("matcher", {}) or {}
        if self.max_workers is None:
            self.max_workers = cfg.get("max_workers")
        if self.batch_size is None:
            self.batch_size = cfg.get("batch_size")

        missing = [
            name for name, value in (
                ("max_workers", self.max_workers),
                ("batch_size", self.batch_size),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"matcher settings missing in app.yaml: {', '.join(missing)}")
        if self.max_workers < 1 or self.batch_size < 1:
            raise ValueError("matcher max_workers and batch_size must be positive")


# =============================================================================
# Compound Assembly
# =============================================================================

def compound_phrases(candidates: Sequence[str]) -> Iterator[str]:
    """Yield every ordered pair "w1 w2", including w1 == w2."""
    for first in candidates:
        for second in candidates:
            yield f"{first} {second}"


def _batches(items: Iterable[str], size: int) -> Iterator[List[str]]:
    iterator = iter(items)
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            return
        yield batch


# =============================================================================
# Matcher
# =============================================================================

class DictionaryMatcher:
    """
    Filters compound phrases against a dictionary using a thread pool.

    The dictionary is only read, never modified, so it is shared across
    workers without locking.
    """

    def __init__(self, config: MatcherConfig = None):
        self.config = config or MatcherConfig()
        self._lock = threading.Lock()

    def match(self,
              candidates: Sequence[str],
              dictionary: Optional[Container[str]]) -> List[str]:
        """
        Return the compound phrases found in the dictionary.

        Args:
            candidates: Candidate syllables (duplicates are collapsed)
            dictionary: Anything supporting `in` (Wordlist, set, ...)

        Returns:
            Distinct matching phrases in no particular order

        Raises:
            DictionaryUnavailableError: If no dictionary was supplied
        """
        if dictionary is None:
            raise DictionaryUnavailableError("No dictionary loaded; cannot match candidates")

        unique = list(dict.fromkeys(candidates))
        if not unique:
            return []

        total = len(unique) ** 2
        logger.debug(
            f"Checking {total} phrases from {len(unique)} syllables "
            f"({self.config.max_workers} workers)"
        )

        matches: List[str] = []
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = [
                executor.submit(self._check_batch, batch, dictionary, matches)
                for batch in _batches(compound_phrases(unique), self.config.batch_size)
            ]
            for future in as_completed(futures):
                future.result()

        logger.info(f"{len(matches)} of {total} phrases found in dictionary")
        return matches

    def _check_batch(self,
                     phrases: List[str],
                     dictionary: Container[str],
                     matches: List[str]) -> int:
        found = [phrase for phrase in phrases if phrase in dictionary]
        if found:
            with self._lock:
                matches.extend(found)
        return len(found)


def match(candidates: Sequence[str],
          dictionary: Optional[Container[str]],
          config: MatcherConfig = None) -> List[str]:
    """Convenience wrapper around DictionaryMatcher.match()."""
    return DictionaryMatcher(config).match(candidates, dictionary)


__all__ = [
    'MatcherConfig',
    'DictionaryMatcher',
    'compound_phrases',
    'match',
]
