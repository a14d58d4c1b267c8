#!/usr/bin/env python3
"""
VTV - Vietnamese Word Finder
============================

Finds the two-syllable Vietnamese words that can be spelled from the
letters of a query, tone marks added freely.

Quick Start
-----------
    from vtv import VietWordFinder

    finder = VietWordFinder(wordlist_path="data/Viet39K.txt")
    result = finder.search("tiengviet")
    print(result.summary())
    for row in result.rows():
        print(" | ".join(row))

Modules
-------
    vtv.tones     - Tone mark engine (add/remove/strip)
    vtv.phonemes  - Phonotactic tables loaded from YAML
    vtv.generator - Syllable candidate generator
    vtv.matcher   - Parallel dictionary matcher
    vtv.wordlist  - Word list loader
    vtv.search    - Search pipeline

CLI Usage
---------
    python -m vtv search "tiengviet" --wordlist data/Viet39K.txt
    python -m vtv syllables "ba"
    python -m vtv strip "Tiếng Việt"
"""

__version__ = "0.1.0"
__author__ = "VTV"

from typing import List, Optional

from .tones import Tone, add_tone, remove_tone, strip_all_tones, normalize
from .phonemes import PhoneticTables, load_vietnamese
from .generator import Arity, VowelCandidate, SyllableGenerator
from .wordlist import DictionaryUnavailableError, Wordlist, load_wordlist
from .matcher import DictionaryMatcher, MatcherConfig, compound_phrases
from .search import SearchResult, validate_query, search


class VietWordFinder:
    """
    Main interface bundling a word list, generator and matcher.

    The word list is loaded on construction so a missing file fails
    before any search is attempted.
    """

    def __init__(self,
                 wordlist_path: Optional[str] = None,
                 wordlist: Optional[Wordlist] = None,
                 config: Optional[MatcherConfig] = None):
        self.wordlist = wordlist if wordlist is not None else load_wordlist(wordlist_path)
        self.generator = SyllableGenerator()
        self.matcher = DictionaryMatcher(config)

    def search(self, query: str) -> SearchResult:
        """Search the word list for words spelled from the query letters."""
        return search(query, self.wordlist, self.matcher, self.generator)

    def syllables(self, letters: str) -> List[str]:
        """Distinct candidate syllables for the letters of `letters`."""
        return list(dict.fromkeys(self.generator.generate(normalize(letters))))


__all__ = [
    '__version__',
    'VietWordFinder',
    # Tones
    'Tone',
    'add_tone',
    'remove_tone',
    'strip_all_tones',
    'normalize',
    # Tables and generation
    'PhoneticTables',
    'load_vietnamese',
    'Arity',
    'VowelCandidate',
    'SyllableGenerator',
    # Dictionary and matching
    'DictionaryUnavailableError',
    'Wordlist',
    'load_wordlist',
    'DictionaryMatcher',
    'MatcherConfig',
    'compound_phrases',
    # Search
    'SearchResult',
    'validate_query',
    'search',
]
