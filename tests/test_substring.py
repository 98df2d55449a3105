"""Tests for longest common substring matching."""

import pytest

import stringmetrics as sm
from stringmetrics import MatchRange


class TestSubstringSimilarity:
    """Tests for substring_similarity."""

    def test_contained_needle(self):
        match = sm.substring_similarity("cat", "concatenate")
        assert match.score == pytest.approx(6 / 14)
        assert match.range == MatchRange(3, 6)
        assert match.needle_range == MatchRange(0, 3)

    def test_identical(self):
        match = sm.substring_similarity("hello", "hello")
        assert match.score == 1.0
        assert tuple(match.range) == (0, 5)

    def test_no_overlap(self):
        match = sm.substring_similarity("abc", "xyz")
        assert match.score == 0.0
        assert match.range is None
        assert match.needle_range is None

    def test_empty_inputs(self):
        assert sm.substring_similarity("", "abc") == sm.SubstringMatch(0.0)
        assert sm.substring_similarity("abc", "") == sm.SubstringMatch(0.0)
        assert sm.substring_similarity("", "").range is None

    def test_first_longest_wins(self):
        # "ab" and "xy" are both length 2; "ab" comes first in the needle
        match = sm.substring_similarity("abxy", "xyab")
        assert tuple(match.range) == (2, 4)
        assert tuple(match.needle_range) == (0, 2)
        assert match.score == pytest.approx(0.5)

    def test_code_point_offsets(self):
        match = sm.substring_similarity("cat", "\U0001F600cat")
        assert tuple(match.range) == (1, 4)

    def test_range_slices_to_shared_text(self):
        needle, haystack = "ell", "yellow"
        match = sm.substring_similarity(needle, haystack)
        assert match.range.slice(haystack) == match.needle_range.slice(needle) == "ell"
        assert len(match.range) == 3


class TestLongestCommonSubstring:
    """Tests for longest_common_substring."""

    def test_basic(self):
        assert sm.longest_common_substring("cat", "concatenate") == "cat"
        assert sm.longest_common_substring("programming", "grammar") == "gramm"

    def test_none_shared(self):
        assert sm.longest_common_substring("abc", "xyz") == ""
        assert sm.longest_common_substring("", "xyz") == ""


class TestMatchRange:
    """Tests for the MatchRange value type."""

    def test_unpacking(self):
        start, end = MatchRange(2, 5)
        assert (start, end) == (2, 5)

    def test_empty_range_allowed(self):
        assert len(MatchRange(4, 4)) == 0

    @pytest.mark.parametrize("start,end", [(3, 1), (-1, 2)])
    def test_invalid_range_raises(self, start, end):
        with pytest.raises(sm.ValidationError):
            MatchRange(start, end)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            MatchRange(0, 1).start = 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
