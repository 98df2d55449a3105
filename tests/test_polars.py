"""Tests for Polars integration."""

import polars as pl
import pytest

import stringmetrics as sm
from stringmetrics.polars_ext import RANK_SCHEMA, distance_series, rank_series, similarity_series


class TestSimilaritySeries:
    """Tests for similarity_series function."""

    def test_basic(self):
        left = pl.Series(["hello", "world"])
        right = pl.Series(["hallo", "word"])
        result = similarity_series(left, right, "levenshtein")

        assert isinstance(result, pl.Series)
        assert result.name == "similarity"
        assert result.dtype == pl.Float64
        assert result.to_list() == [0.8, 0.8]

    def test_default_metric(self):
        result = similarity_series(pl.Series(["MARTHA"]), pl.Series(["MARHTA"]))
        assert result[0] == sm.jaro_winkler("MARTHA", "MARHTA")

    def test_nulls_scored_as_empty(self):
        result = similarity_series(pl.Series(["abc", None]), pl.Series([None, None]), "levenshtein")
        assert result.to_list() == [0.0, 1.0]

    def test_length_mismatch(self):
        with pytest.raises(sm.ValidationError, match="equal length"):
            similarity_series(pl.Series(["a", "b"]), pl.Series(["a"]))

    def test_empty(self):
        result = similarity_series(pl.Series([], dtype=pl.Utf8), pl.Series([], dtype=pl.Utf8))
        assert len(result) == 0


class TestDistanceSeries:
    """Tests for distance_series function."""

    def test_basic(self):
        result = distance_series(pl.Series(["kitten", "CA"]), pl.Series(["sitting", "ABC"]))
        assert result.name == "distance"
        assert result.dtype == pl.Int64
        assert result.to_list() == [3, 3]

    def test_metric(self):
        result = distance_series(pl.Series(["CA"]), pl.Series(["ABC"]), "damerau_levenshtein")
        assert result.to_list() == [2]

    def test_rejects_similarity_metric(self):
        with pytest.raises(sm.ConfigurationError):
            distance_series(pl.Series(["a"]), pl.Series(["b"]), "jaro_winkler")


class TestRankSeries:
    """Tests for rank_series function."""

    def test_basic(self):
        queries = pl.Series(["colr", "sise"])
        result = rank_series(queries, ["color", "size", "shape"], min_score=0.5)

        assert isinstance(result, pl.DataFrame)
        assert dict(result.schema) == RANK_SCHEMA
        assert result.rows() == [
            (0, "colr", 1, "color", "color", 0.8, 0),
            (1, "sise", 1, "size", "size", 0.75, 1),
        ]

    def test_rank_starts_at_one(self):
        result = rank_series(pl.Series(["abc"]), ["abd", "abc", "abe"])
        assert result["rank"].to_list() == [1, 2, 3]
        assert result["value"].to_list() == ["abc", "abd", "abe"]
        assert result["candidate_idx"].to_list() == [1, 0, 2]

    def test_config_object(self):
        config = sm.SuggestionConfig(max_suggestions=1)
        result = rank_series(pl.Series(["abc"]), ["abd", "abc"], config)
        assert result["value"].to_list() == ["abc"]

    def test_series_candidates_nulls_dropped(self):
        result = rank_series(pl.Series(["abc"]), pl.Series([None, "abc"]))
        assert result["candidate_idx"].to_list() == [0]

    def test_null_queries_skipped(self):
        result = rank_series(pl.Series([None, "abc"]), ["abc"])
        assert result["query_idx"].to_list() == [1]

    def test_empty_series(self):
        """Empty series should return empty DataFrame with the full schema."""
        result = rank_series(pl.Series([], dtype=pl.Utf8), ["apple", "banana"])
        assert len(result) == 0
        assert result.columns == list(RANK_SCHEMA)

    def test_no_matches(self):
        """No matches above threshold."""
        result = rank_series(pl.Series(["xyz"]), ["apple", "banana"], min_score=0.9)
        assert len(result) == 0

    def test_unknown_option(self):
        with pytest.raises(sm.ConfigurationError):
            rank_series(pl.Series(["abc"]), ["abc"], threshold=0.5)


class TestPolarsSubpackage:
    def test_reexports(self):
        from stringmetrics import polars as smp

        assert smp.similarity_series is similarity_series
        assert smp.distance_series is distance_series
        assert smp.rank_series is rank_series


class TestExpressionNamespace:
    """Tests for .strsim expression namespace."""

    def test_similarity_literal(self):
        """Similarity against literal string."""
        df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
        result = df.with_columns(
            score=pl.col("name").strsim.similarity("John", metric="levenshtein")
        )

        assert "score" in result.columns
        assert result["score"].to_list() == pytest.approx([1.0, 0.75, 0.25])

    def test_similarity_column(self):
        """Similarity between two columns."""
        df = pl.DataFrame({
            "name1": ["John", "Jane"],
            "name2": ["Jon", "Jane"],
        })
        result = df.with_columns(
            score=pl.col("name1").strsim.similarity(pl.col("name2"), metric="levenshtein")
        )

        assert result["score"].to_list() == pytest.approx([0.75, 1.0])

    def test_similarity_null(self):
        df = pl.DataFrame({"name": ["John", None]})
        result = df.with_columns(
            score=pl.col("name").strsim.similarity("", metric="levenshtein")
        )
        assert result["score"].to_list() == [0.0, 1.0]

    def test_is_similar(self):
        """Boolean similarity check."""
        df = pl.DataFrame({"name": ["John", "Jon", "Jane", "Bob"]})
        result = df.filter(
            pl.col("name").strsim.is_similar("John", min_score=0.7, metric="levenshtein")
        )

        assert result["name"].to_list() == ["John", "Jon"]

    def test_best_match(self):
        """Find best match from choices."""
        df = pl.DataFrame({"query": ["appel", "bananna", "xyz"]})
        choices = ["apple", "banana", "cherry"]

        result = df.with_columns(
            match=pl.col("query").strsim.best_match(choices, min_score=0.6)
        )

        assert result["match"].to_list() == ["apple", "banana", None]

    def test_best_match_unknown_option(self):
        with pytest.raises(sm.ConfigurationError):
            pl.col("query").strsim.best_match(["a"], min_similarity=0.6)

    def test_distance(self):
        """Edit distance calculation."""
        df = pl.DataFrame({"name": ["hello", "helo", "world"]})
        result = df.with_columns(
            dist=pl.col("name").strsim.distance("hello")
        )

        assert result["dist"].to_list() == [0, 1, 4]
        assert result["dist"].dtype == pl.Int64

    def test_distance_column(self):
        df = pl.DataFrame({"a": ["CA", "ab"], "b": ["ABC", "ba"]})
        result = df.select(dist=pl.col("a").strsim.distance(pl.col("b"), metric="osa"))
        assert result["dist"].to_list() == [3, 1]

    def test_distance_rejects_similarity_metric(self):
        with pytest.raises(sm.ConfigurationError):
            pl.col("name").strsim.distance("hello", metric="ratio")

    def test_normalize(self):
        """String normalization."""
        df = pl.DataFrame({"name": ["  HELLO World ", "Straße", None]})
        result = df.with_columns(
            normalized=pl.col("name").strsim.normalize("default")
        )

        assert result["normalized"].to_list() == ["hello world", "strasse", None]

    def test_normalize_locale(self):
        df = pl.DataFrame({"name": ["ISTANBUL"]})
        result = df.select(pl.col("name").strsim.normalize("default", locale="tr"))
        assert result["name"][0] == "ıstanbul"
