"""Tests for Longest Common Subsequence based metrics.

This module tests Indel and LCS-sequence distances and the percentage-scale
ratio scorers built on them.
"""

import pytest

import stringmetrics as sm


class TestLCS:
    """Tests for Longest Common Subsequence."""

    def test_lcs_length(self):
        assert sm.lcs_seq_length("ABCDGH", "AEDFHR") == 3  # ADH
        assert sm.lcs_seq_length("AGGTAB", "GXTXAYB") == 4  # GTAB

    def test_lcs_seq_distance(self):
        # 6 + 6 - 2 * 3
        assert sm.lcs_seq("ABCDGH", "AEDFHR") == 6

    def test_lcs_seq_matches_indel(self):
        pairs = [("kitten", "sitting"), ("", "abc"), ("abc", "abc"), ("CA", "ABC")]
        for a, b in pairs:
            assert sm.lcs_seq(a, b) == sm.indel(a, b)
            assert sm.lcs_seq_similarity(a, b) == sm.indel_similarity(a, b)

    def test_lcs_seq_similarity_normalized_by_total_length(self):
        # LCS "ab" has length 2: 2 * 2 / (4 + 2), not 2 / max(4, 2)
        assert sm.lcs_seq_length("abcd", "ab") == 2
        assert sm.lcs_seq_similarity("abcd", "ab") == pytest.approx(2 / 3)
        assert sm.lcs_seq_similarity("abcd", "ab") != pytest.approx(0.5)


class TestLCSEdgeCases:
    """Tests for LCS edge cases."""

    def test_lcs_empty_strings(self):
        assert sm.lcs_seq_length("", "") == 0
        assert sm.lcs_seq_length("abc", "") == 0
        assert sm.lcs_seq_length("", "abc") == 0

    def test_lcs_no_common(self):
        assert sm.lcs_seq_length("abc", "xyz") == 0

    def test_lcs_identical(self):
        assert sm.lcs_seq_length("hello", "hello") == 5


class TestIndel:
    """Tests for Indel distance (insertions and deletions only)."""

    def test_substitution_costs_two(self):
        assert sm.indel("abc", "abd") == 2

    def test_classic_example(self):
        # LCS("kitten", "sitting") = "ittn"
        assert sm.indel("kitten", "sitting") == 5

    def test_empty(self):
        assert sm.indel("", "") == 0
        assert sm.indel("", "abc") == 3

    def test_similarity(self):
        assert sm.indel_similarity("abc", "ab") == 0.8
        assert sm.indel_similarity("abc", "xyz") == 0.0
        assert sm.indel_similarity("", "") == 1.0

    def test_result(self):
        result = sm.indel_result("kitten", "sitting")
        assert result.distance == 5
        assert result.normalized_similarity == pytest.approx(1 - 5 / 13)


class TestRatio:
    """Tests for percentage-scale ratio scorers."""

    def test_ratio(self):
        assert sm.ratio("kitten", "sitting") == pytest.approx(100 * (1 - 5 / 13))
        assert sm.ratio("hello", "hello") == 100.0
        assert sm.ratio("abc", "xyz") == 0.0
        assert sm.ratio("", "") == 100.0

    def test_partial_ratio_contained(self):
        assert sm.partial_ratio("cat", "concatenate") == 100.0
        assert sm.partial_ratio("concatenate", "cat") == 100.0

    def test_partial_ratio_best_window(self):
        # Best window of "xbcdy" for "abcd" shares 3 characters
        assert sm.partial_ratio("abcd", "xbcdy") == pytest.approx(75.0)

    def test_partial_ratio_empty(self):
        assert sm.partial_ratio("", "") == 100.0
        assert sm.partial_ratio("", "abc") == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
