"""
Tests for Phonetic Tables
=========================
Tests loading of the Vietnamese phonotactic tables from YAML.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vtv.phonemes import (
    ANY_ONSET,
    build_tables,
    load_vietnamese,
    reload_configs,
)
from vtv.tones import BASE_VOWELS


@pytest.fixture
def tables():
    return load_vietnamese()


class TestInventories:
    """Tests for letter inventories."""

    def test_consonants(self, tables):
        """Test the 17 single consonants."""
        assert len(tables.consonants) == 17
        assert "đ" in tables.consonants
        assert "f" not in tables.consonants

    def test_double_consonants(self, tables):
        """Test digraphs and the ngh trigraph."""
        assert len(tables.double_consonants) == 11
        assert tables.is_double_consonant("ngh")
        assert tables.is_double_consonant("tr")
        assert not tables.is_double_consonant("bl")

    def test_vowels_match_tone_engine(self, tables):
        """Test vowel table equals the tone engine's base vowels."""
        assert tables.vowels == frozenset(BASE_VOWELS)

    def test_y_is_a_string(self, tables):
        """Test y is read as a letter, not a YAML boolean."""
        assert "y" in tables.vowels
        assert all(isinstance(v, str) for v in tables.vowels)

    def test_double_vowels(self, tables):
        """Test diphthong membership."""
        assert tables.is_double_vowel("ươ")
        assert tables.is_double_vowel("uâ")
        assert not tables.is_double_vowel("aa")

    def test_vowels_without_final(self, tables):
        """Test nuclei barred from a coda."""
        assert not tables.allows_final_consonant("ai")
        assert not tables.allows_final_consonant("uôi")
        assert tables.allows_final_consonant("oa")


class TestCodaTables:
    """Tests for coda rules."""

    def test_front_vowels(self, tables):
        """Test front vowels and their codas."""
        assert tables.front_vowels == {"a", "ê", "i"}
        assert tables.front_vowel_consonants == {"nh", "ch"}

    def test_plain_finals(self, tables):
        """Test residual codas after removing nh/ch and stop codas."""
        assert tables.plain_final_consonants == {"m", "n", "ng"}

    def test_acute_dot_subset_of_finals(self, tables):
        """Test stop codas are all legal finals."""
        assert tables.acute_dot_consonants <= tables.final_consonants

    def test_untoned_double_vowels(self, tables):
        """Test the diphthongs generated without tones."""
        assert tables.untoned_double_vowels == {"uâ", "uê", "oo"}


class TestOnsetExclusions:
    """Tests for excludes_onset()."""

    def test_all_onsets(self, tables):
        """Test spellings barred after any onset."""
        for spelling in ("â", "uâ", "iê"):
            assert tables.excludes_onset(spelling, "b")
            assert tables.excludes_onset(spelling, "ngh")

    def test_specific_onsets(self, tables):
        """Test spellings barred after particular onsets."""
        assert tables.excludes_onset("u", "q")
        assert not tables.excludes_onset("u", "b")
        assert tables.excludes_onset("êu", "nh")
        assert tables.excludes_onset("iêm", "tr")
        assert tables.excludes_onset("ên", "ch")

    def test_unlisted_spelling(self, tables):
        """Test spellings without an entry allow every onset."""
        assert not tables.excludes_onset("a", "q")
        assert not tables.excludes_onset("ong", "c")


class TestLoading:
    """Tests for build_tables() and caching."""

    def test_cached(self):
        """Test the tables load once."""
        assert load_vietnamese() is load_vietnamese()

    def test_reload(self):
        """Test reload_configs() clears the cache."""
        first = load_vietnamese()
        reload_configs()
        second = load_vietnamese()
        assert first is not second
        assert first == second

    def test_missing_table(self):
        """Test a missing table raises ValueError naming it."""
        with pytest.raises(ValueError, match="onset_exclusions"):
            build_tables({
                'consonants': ['b'],
                'double_consonants': [],
                'vowels': ['a'],
                'double_vowels': [],
                'vowels_without_final_consonant': [],
                'untoned_double_vowels': [],
                'front_vowels': [],
                'front_vowel_consonants': [],
                'final_consonants': [],
                'acute_dot_consonants': [],
            })

    def test_wildcard_in_custom_tables(self):
        """Test the wildcard from a hand-built table."""
        raw = {key: [] for key in (
            'consonants', 'double_consonants', 'vowels', 'double_vowels',
            'vowels_without_final_consonant', 'untoned_double_vowels',
            'front_vowels', 'front_vowel_consonants', 'final_consonants',
            'acute_dot_consonants',
        )}
        raw['onset_exclusions'] = {'o': [ANY_ONSET]}
        custom = build_tables(raw)
        assert custom.excludes_onset('o', 'x')
