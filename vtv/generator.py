#!/usr/bin/env python3
"""
Syllable Candidate Generator
============================
Enumerates every Vietnamese syllable spelling that can be built from a
letter inventory, with every legal tone placement.

Stages:
1. Consonant units: single onsets plus digraph/trigraph clusters
2. Vowel units: each vowel with its five tones, plus diphthongs
3. Vowel + coda: nuclei closed by a final consonant, gated by tone
4. Assembly: bare nuclei, bare onsets, then onset + nucleus (+ coda)
   minus the irregular exclusions

Generation is deterministic. Duplicate spellings from different
derivation paths are kept; the dictionary filter collapses them.

Usage:
    from vtv.generator import split_letters, make_syllables

    consonants, vowels = split_letters("ba")
    make_syllables(consonants, vowels)
    # ['a', 'à', 'á', 'ả', 'ã', 'ạ', 'b', 'ba', 'bà', ...]
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Sequence

from .phonemes import PhoneticTables, load_vietnamese
from .tones import Tone, MARKED_TONES, add_tone

logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

class Arity(Enum):
    """Number of vowel letters in a nucleus."""
    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class VowelCandidate:
    """A vowel nucleus spelling with its tone."""
    spelling: str
    arity: Arity
    tone: Tone = Tone.NONE
    allows_final_consonant: bool = True

    @property
    def is_acute_or_dot(self) -> bool:
        return self.tone in (Tone.ACUTE, Tone.DOT)


# =============================================================================
# Generator
# =============================================================================

class SyllableGenerator:
    """
    Builds candidate syllables from distinct consonant and vowel letters.

    Args:
        tables: Phonotactic tables (default: bundled Vietnamese tables)
    """

    def __init__(self, tables: Optional[PhoneticTables] = None):
        self.tables = tables or load_vietnamese()

    def split_letters(self, text: str) -> Tuple[List[str], List[str]]:
        """
        Split text into distinct consonant and vowel letters.

        Letters keep their first-occurrence order; anything that is neither
        a consonant nor a base vowel (digits, punctuation, toned glyphs) is
        ignored.
        """
        consonants: List[str] = []
        vowels: List[str] = []
        for char in text:
            if self.tables.is_consonant(char):
                if char not in consonants:
                    consonants.append(char)
            elif self.tables.is_vowel(char):
                if char not in vowels:
                    vowels.append(char)
        return consonants, vowels

    def make_consonants(self, consonants: Sequence[str]) -> List[str]:
        """Single onsets plus every ordered pair forming a known cluster."""
        units = []
        for first in consonants:
            units.append(first)
            for second in consonants:
                cluster = first + second
                if self.tables.is_double_consonant(cluster):
                    units.append(cluster)
        return units

    def make_vowels(self, vowels: Sequence[str]) -> List[VowelCandidate]:
        """
        Vowel nuclei for the given letters.

        Every letter yields itself plus its five toned forms. Every ordered
        pair forming a known diphthong yields the bare diphthong and, unless
        the diphthong is listed as untoned, five variants toned on the first
        letter.
        """
        tables = self.tables
        candidates = []
        for first in vowels:
            candidates.append(VowelCandidate(first, Arity.SINGLE))
            for tone in MARKED_TONES:
                candidates.append(
                    VowelCandidate(add_tone(first, tone), Arity.SINGLE, tone)
                )

            for second in vowels:
                diphthong = first + second
                if not tables.is_double_vowel(diphthong):
                    continue

                allows_final = tables.allows_final_consonant(diphthong)
                candidates.append(
                    VowelCandidate(diphthong, Arity.DOUBLE, Tone.NONE, allows_final)
                )
                if diphthong in tables.untoned_double_vowels:
                    continue
                for tone in MARKED_TONES:
                    candidates.append(VowelCandidate(
                        add_tone(first, tone) + second,
                        Arity.DOUBLE,
                        tone,
                        allows_final,
                    ))
        return candidates

    def make_vowel_consonants(self,
                              vowels: Sequence[VowelCandidate],
                              consonants: Sequence[str]) -> List[str]:
        """
        Close each vowel nucleus with the codas its tone permits.

        Rules, first match wins:
            a. bare front vowel (a, ê, i): nh or ch only
            b. acute/dot tone: stop codas (p, t, ch, c); nh/ch still need
               a front vowel
            c. otherwise: the plain codas (m, n, ng)
        Nuclei that take no coda are skipped under b and c.
        """
        tables = self.tables
        plain_finals = tables.plain_final_consonants
        combos = []
        for vowel in vowels:
            if tables.is_front_vowel(vowel.spelling):
                for final in consonants:
                    if final in tables.front_vowel_consonants:
                        combos.append(vowel.spelling + final)
            elif vowel.is_acute_or_dot and vowel.allows_final_consonant:
                for final in consonants:
                    if final not in tables.acute_dot_consonants:
                        continue
                    # Never true here: bare front vowels took rule a
                    if final in tables.front_vowel_consonants:
                        if tables.is_front_vowel(vowel.spelling):
                            combos.append(vowel.spelling + final)
                    else:
                        combos.append(vowel.spelling + final)
            elif vowel.allows_final_consonant:
                for final in consonants:
                    if final in plain_finals:
                        combos.append(vowel.spelling + final)
        return combos

    def make_syllables(self,
                       consonants: Sequence[str],
                       vowels: Sequence[str]) -> List[str]:
        """
        Generate all candidate syllables for a letter inventory.

        Args:
            consonants: Distinct consonant letters
            vowels: Distinct base vowel letters

        Returns:
            Candidate syllables (may contain duplicates)
        """
        onsets = self.make_consonants(consonants)
        nuclei = self.make_vowels(vowels)
        closed = self.make_vowel_consonants(nuclei, onsets)
        logger.debug(
            f"{len(onsets)} onsets, {len(nuclei)} nuclei, {len(closed)} closed nuclei"
        )

        rhymes = [v.spelling for v in nuclei] + closed
        syllables = rhymes + onsets
        for onset in onsets:
            for rhyme in rhymes:
                if not self.tables.excludes_onset(rhyme, onset):
                    syllables.append(onset + rhyme)

        logger.debug(f"{len(syllables)} candidate syllables")
        return syllables

    def generate(self, text: str) -> List[str]:
        """Split already-normalized text and generate its syllables."""
        consonants, vowels = self.split_letters(text)
        return self.make_syllables(consonants, vowels)


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

def split_letters(text: str) -> Tuple[List[str], List[str]]:
    return SyllableGenerator().split_letters(text)


def make_consonants(consonants: Sequence[str]) -> List[str]:
    return SyllableGenerator().make_consonants(consonants)


def make_vowels(vowels: Sequence[str]) -> List[VowelCandidate]:
    return SyllableGenerator().make_vowels(vowels)


def make_vowel_consonants(vowels: Sequence[VowelCandidate],
                          consonants: Sequence[str]) -> List[str]:
    return SyllableGenerator().make_vowel_consonants(vowels, consonants)


def make_syllables(consonants: Sequence[str], vowels: Sequence[str]) -> List[str]:
    return SyllableGenerator().make_syllables(consonants, vowels)


__all__ = [
    'Arity',
    'VowelCandidate',
    'SyllableGenerator',
    'split_letters',
    'make_consonants',
    'make_vowels',
    'make_vowel_consonants',
    'make_syllables',
]
