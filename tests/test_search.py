"""
Tests for the Search Pipeline
=============================
Tests query validation, end-to-end search and result formatting.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vtv import VietWordFinder
from vtv.matcher import DictionaryMatcher, MatcherConfig
from vtv.search import SearchResult, search, validate_query
from vtv.wordlist import DictionaryUnavailableError, Wordlist


@pytest.fixture
def wordlist():
    return Wordlist(["bà ba", "ba ba", "xa lạ", "ba", "bà ba ba"])


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidateQuery:
    """Tests for validate_query()."""

    @pytest.mark.parametrize("query", ["bababa", "a" * 15, "tiengviet"])
    def test_accepts_in_bounds(self, query):
        valid, value = validate_query(query)
        assert valid
        assert value == query

    @pytest.mark.parametrize("query", ["", "babab", "a" * 16])
    def test_rejects_out_of_bounds(self, query):
        valid, message = validate_query(query)
        assert not valid
        assert message == "Độ dài truy vấn tìm kiếm phải từ 6 đến 15 ký tự."

    def test_outer_whitespace_not_counted(self):
        """Test surrounding whitespace is trimmed before counting."""
        valid, value = validate_query("   babab   ")
        assert not valid
        valid, value = validate_query("  bababa  ")
        assert valid
        assert value == "bababa"

    def test_none(self):
        valid, _ = validate_query(None)
        assert not valid


# =============================================================================
# Search Tests
# =============================================================================

class TestSearch:
    """Tests for search()."""

    def test_finds_toned_compounds(self, wordlist):
        """Test tone marks are added freely to the query letters."""
        result = search("bababa", wordlist)
        assert set(result.words) == {"bà ba", "ba ba"}
        assert result.normalized == "bababa"
        assert result.consonants == ["b"]
        assert result.vowels == ["a"]
        assert result.syllables > 0

    def test_toned_query_with_spaces(self, wordlist):
        """Test tones, case and spaces in the query are normalized away."""
        result = search("Bà Bá Ba", wordlist)
        assert result.normalized == "bababa"
        assert set(result.words) == {"bà ba", "ba ba"}

    def test_no_results(self):
        result = search("bababa", Wordlist(["xa lạ"]))
        assert result.words == []
        assert result.total == 0

    def test_query_too_short(self, wordlist):
        with pytest.raises(ValueError, match="Độ dài"):
            search("baba", wordlist)

    def test_custom_matcher(self, wordlist):
        """Test a single-threaded matcher gives the same words."""
        matcher = DictionaryMatcher(MatcherConfig(max_workers=1, batch_size=1))
        result = search("bababa", wordlist, matcher=matcher)
        assert set(result.words) == {"bà ba", "ba ba"}

    def test_missing_wordlist(self, tmp_path, monkeypatch):
        """Test a missing configured word list stops the search."""
        missing = str(tmp_path / "missing.txt")
        monkeypatch.setattr(
            "vtv.wordlist.get_setting",
            lambda key, default=None: missing if key == "wordlist.path" else default,
        )
        with pytest.raises(DictionaryUnavailableError):
            search("bababa")


# =============================================================================
# Result Formatting Tests
# =============================================================================

class TestSearchResult:
    """Tests for SearchResult formatting."""

    def make_result(self, count):
        return SearchResult(
            query="q",
            normalized="q",
            words=[f"w{i} x" for i in range(count)],
        )

    def test_rows(self):
        """Test rows of five with a short last row."""
        rows = self.make_result(7).rows(5)
        assert [len(row) for row in rows] == [5, 2]

    def test_rows_default_from_settings(self):
        rows = self.make_result(12).rows()
        assert [len(row) for row in rows] == [5, 5, 2]

    def test_rows_invalid(self):
        with pytest.raises(ValueError):
            self.make_result(3).rows(0)

    def test_summary_empty(self):
        assert self.make_result(0).summary() == "Không tìm thấy từ nào."

    def test_summary_count(self):
        assert self.make_result(7).summary() == "Kết quả: 7 từ."


# =============================================================================
# VietWordFinder Tests
# =============================================================================

class TestVietWordFinder:
    """Tests for the VietWordFinder facade."""

    def test_search(self, wordlist):
        finder = VietWordFinder(wordlist=wordlist)
        assert set(finder.search("bababa").words) == {"bà ba", "ba ba"}

    def test_wordlist_path(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("bà ba\nxa lạ\n", encoding="utf-8")
        finder = VietWordFinder(wordlist_path=str(path))
        assert finder.search("bababa").words == ["bà ba"]

    def test_missing_wordlist_fails_on_construction(self, tmp_path):
        with pytest.raises(DictionaryUnavailableError):
            VietWordFinder(wordlist_path=str(tmp_path / "missing.txt"))

    def test_syllables_distinct(self):
        syllables = VietWordFinder(wordlist=Wordlist([])).syllables("baba")
        assert len(syllables) == len(set(syllables))
        assert "bà" in syllables
        assert "b" in syllables
