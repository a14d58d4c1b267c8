#!/usr/bin/env python3
"""
Tone Diacritics
===============
Adds and removes the five Vietnamese tone marks on base vowels.

Each of the 12 base vowels (a ă â e ê i o ô ơ u ư y) has exactly one
precomposed glyph per tone. Transforms run in three passes:

1. Canonical decomposition (NFD) of the input
2. Case folding with canonical recomposition (NFC + lower)
3. Per-character remap through the tone table, then NFC

Characters outside the table pass through unchanged, so none of the
functions here raise.

Usage:
    from vtv.tones import Tone, add_tone, remove_tone, strip_all_tones

    add_tone("ơ", Tone.TILDE)        # 'ỡ'
    remove_tone("ỡ", Tone.TILDE)     # 'ơ'
    strip_all_tones("Tiếng Việt")    # 'tiêng viêt'
"""

import unicodedata
from enum import Enum
from typing import Dict


class Tone(Enum):
    """Vietnamese tone marks."""
    NONE = "none"
    GRAVE = "grave"   # huyền
    ACUTE = "acute"   # sắc
    HOOK = "hook"     # hỏi
    TILDE = "tilde"   # ngã
    DOT = "dot"       # nặng


# Order of the glyph columns in BASE_VOWEL_GLYPHS
MARKED_TONES = (Tone.GRAVE, Tone.ACUTE, Tone.HOOK, Tone.TILDE, Tone.DOT)

# Sequence used by strip_all_tones()
STRIP_ORDER = (Tone.GRAVE, Tone.ACUTE, Tone.HOOK, Tone.TILDE, Tone.DOT)

BASE_VOWEL_GLYPHS = {
    'a': 'àáảãạ',
    'ă': 'ằắẳẵặ',
    'â': 'ầấẩẫậ',
    'e': 'èéẻẽẹ',
    'ê': 'ềếểễệ',
    'i': 'ìíỉĩị',
    'o': 'òóỏõọ',
    'ô': 'ồốổỗộ',
    'ơ': 'ờớởỡợ',
    'u': 'ùúủũụ',
    'ư': 'ừứửữự',
    'y': 'ỳýỷỹỵ',
}

BASE_VOWELS = tuple(BASE_VOWEL_GLYPHS)


def _build_tables():
    add_tables: Dict[Tone, Dict[str, str]] = {}
    remove_tables: Dict[Tone, Dict[str, str]] = {}
    for column, tone in enumerate(MARKED_TONES):
        add_tables[tone] = {
            base: glyphs[column] for base, glyphs in BASE_VOWEL_GLYPHS.items()
        }
        remove_tables[tone] = {
            glyphs[column]: base for base, glyphs in BASE_VOWEL_GLYPHS.items()
        }
    return add_tables, remove_tables


ADD_TABLES, REMOVE_TABLES = _build_tables()


def _case_mapped(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return unicodedata.normalize("NFC", decomposed.lower())


def _remap(text: str, table: Dict[str, str]) -> str:
    mapped = ''.join(table.get(ch, ch) for ch in _case_mapped(text))
    return unicodedata.normalize("NFC", mapped)


def add_tone(vowel: str, tone: Tone) -> str:
    """
    Put a tone mark on every base vowel in the input.

    Callers normally pass a single letter; for a diphthong pass only the
    letter that carries the mark.

    Args:
        vowel: Base vowel (or any text)
        tone: Tone to apply; Tone.NONE only case-folds

    Returns:
        Text with the tone applied to each base vowel
    """
    if tone is Tone.NONE:
        return _case_mapped(vowel)
    return _remap(vowel, ADD_TABLES[tone])


def remove_tone(text: str, tone: Tone) -> str:
    """Remove one specific tone mark, leaving the other four alone."""
    if tone is Tone.NONE:
        return _case_mapped(text)
    return _remap(text, REMOVE_TABLES[tone])


def strip_all_tones(text: str) -> str:
    """Remove every tone mark. Vowel quality marks (ă â ê ô ơ ư) stay."""
    for tone in STRIP_ORDER:
        text = remove_tone(text, tone)
    return text


def tone_of(char: str) -> Tone:
    """Tone carried by a single character (Tone.NONE if unmarked)."""
    char = _case_mapped(char)
    for tone, table in REMOVE_TABLES.items():
        if char in table:
            return tone
    return Tone.NONE


def normalize(query: str) -> str:
    """Lowercase, drop all whitespace, strip tone marks."""
    return strip_all_tones(''.join(query.lower().split()))


__all__ = [
    'Tone',
    'MARKED_TONES',
    'BASE_VOWELS',
    'add_tone',
    'remove_tone',
    'strip_all_tones',
    'tone_of',
    'normalize',
]
