#!/usr/bin/env python3
"""
Phonetic Table Loader
=====================
Loads the Vietnamese letter inventories and phonotactic rules from YAML.

The tables are read once per process and shared by reference; nothing
mutates them after load, so worker threads can read them freely.

Usage:
    from vtv.phonemes import load_vietnamese

    tables = load_vietnamese()
    tables.is_double_consonant("ngh")      # True
    tables.excludes_onset("ê", "c")        # True
"""

import yaml
from pathlib import Path
from typing import Dict, FrozenSet, Any, Mapping
from dataclasses import dataclass
from functools import lru_cache


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent

# Marks an exclusion that applies to every onset
ANY_ONSET = "*"

REQUIRED_TABLES = (
    'consonants',
    'double_consonants',
    'vowels',
    'double_vowels',
    'vowels_without_final_consonant',
    'untoned_double_vowels',
    'front_vowels',
    'front_vowel_consonants',
    'final_consonants',
    'acute_dot_consonants',
    'onset_exclusions',
)


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass(frozen=True)
class PhoneticTables:
    """Immutable container for the Vietnamese phonotactic rule base."""
    consonants: FrozenSet[str]
    double_consonants: FrozenSet[str]
    vowels: FrozenSet[str]
    double_vowels: FrozenSet[str]
    vowels_without_final_consonant: FrozenSet[str]
    untoned_double_vowels: FrozenSet[str]
    front_vowels: FrozenSet[str]
    front_vowel_consonants: FrozenSet[str]
    final_consonants: FrozenSet[str]
    acute_dot_consonants: FrozenSet[str]
    onset_exclusions: Mapping[str, FrozenSet[str]]

    @property
    def plain_final_consonants(self) -> FrozenSet[str]:
        """Codas allowed after any other vowel: finals minus nh/ch and stops."""
        return (self.final_consonants
                - self.front_vowel_consonants
                - self.acute_dot_consonants)

    def is_consonant(self, letter: str) -> bool:
        return letter in self.consonants

    def is_vowel(self, letter: str) -> bool:
        return letter in self.vowels

    def is_double_consonant(self, cluster: str) -> bool:
        return cluster in self.double_consonants

    def is_double_vowel(self, cluster: str) -> bool:
        return cluster in self.double_vowels

    def allows_final_consonant(self, spelling: str) -> bool:
        return spelling not in self.vowels_without_final_consonant

    def is_front_vowel(self, spelling: str) -> bool:
        return spelling in self.front_vowels

    def excludes_onset(self, spelling: str, onset: str) -> bool:
        """True if `onset` may not be placed before `spelling`."""
        barred = self.onset_exclusions.get(spelling)
        if not barred:
            return False
        return ANY_ONSET in barred or onset in barred


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Phoneme config not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def build_tables(raw: Dict[str, Any]) -> PhoneticTables:
    """
    Build PhoneticTables from a raw mapping.

    Args:
        raw: Parsed YAML (or an equivalent dict, e.g. in tests)

    Returns:
        PhoneticTables with every list frozen

    Raises:
        ValueError: If a required table is missing
    """
    missing = [key for key in REQUIRED_TABLES if raw.get(key) is None]
    if missing:
        raise ValueError(f"phonetic tables missing: {', '.join(missing)}")

    exclusions = {
        str(spelling): frozenset(str(c) for c in onsets)
        for spelling, onsets in raw['onset_exclusions'].items()
    }

    def _set(key: str) -> FrozenSet[str]:
        return frozenset(str(item) for item in raw[key])

    return PhoneticTables(
        consonants=_set('consonants'),
        double_consonants=_set('double_consonants'),
        vowels=_set('vowels'),
        double_vowels=_set('double_vowels'),
        vowels_without_final_consonant=_set('vowels_without_final_consonant'),
        untoned_double_vowels=_set('untoned_double_vowels'),
        front_vowels=_set('front_vowels'),
        front_vowel_consonants=_set('front_vowel_consonants'),
        final_consonants=_set('final_consonants'),
        acute_dot_consonants=_set('acute_dot_consonants'),
        onset_exclusions=exclusions,
    )


@lru_cache(maxsize=1)
def load_vietnamese() -> PhoneticTables:
    """Load the Vietnamese phonotactic tables."""
    return build_tables(_load_yaml('vietnamese.yaml'))


def reload_configs():
    """Clear cached tables so the next load re-reads the YAML."""
    load_vietnamese.cache_clear()


__all__ = [
    'PhoneticTables',
    'ANY_ONSET',
    'build_tables',
    'load_vietnamese',
    'reload_configs',
]
