"""Polars expression namespace for string similarity.

This module registers a `.strsim` namespace on Polars expressions,
enabling chainable similarity operations directly in Polars expression
contexts. Values are scored one row at a time with map_elements; nulls
are compared as empty strings.

Example:
    >>> import polars as pl
    >>> import stringmetrics  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").strsim.is_similar("John", min_score=0.7)
    ... )
"""

from typing import Optional, Union

import polars as pl

from stringmetrics._utils import resolve_metric
from stringmetrics.distance import distance as _distance
from stringmetrics.enums import Locale, Metric, NormalizationPreset
from stringmetrics.normalization import normalize_with_locale
from stringmetrics.suggest import with_overrides
from stringmetrics.suggest import rank as _rank
from stringmetrics.suggest import score as _score


def _as_str(value) -> str:
    return str(value) if value is not None else ""


def _pairwise(expr: pl.Expr, other: Union[str, pl.Expr], func, dtype) -> pl.Expr:
    if isinstance(other, str):
        return expr.map_elements(
            lambda s: func(_as_str(s), other), return_dtype=dtype, skip_nulls=False
        )
    return pl.struct([expr.alias("_left"), other.alias("_right")]).map_elements(
        lambda row: func(_as_str(row["_left"]), _as_str(row["_right"])),
        return_dtype=dtype,
    )


@pl.api.register_expr_namespace("strsim")
class StrSimExprNamespace:
    """
    String similarity namespace for Polars expressions.

    Access via `.strsim` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        metric: Union[str, Metric] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            metric: Any metric name or Metric enum

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name1").strsim.similarity(pl.col("name2"), metric="osa")
            ... )
        """
        resolved = resolve_metric(metric)
        return _pairwise(self._expr, other, lambda a, b: _score(a, b, resolved), pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_score: float = 0.8,
        metric: Union[str, Metric] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Example:
            >>> df.filter(pl.col("name").strsim.is_similar("John", min_score=0.85))
        """
        return self.similarity(other, metric=metric) >= min_score

    def distance(
        self,
        other: Union[str, pl.Expr],
        metric: Union[str, Metric] = "levenshtein",
    ) -> pl.Expr:
        """
        Calculate edit distance between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            metric: One of "levenshtein", "osa", "damerau_levenshtein", "indel", "lcs_seq"

        Returns:
            Expression producing integer distances

        Raises:
            ConfigurationError: If the metric is not an edit distance.
        """
        resolved = resolve_metric(metric, distance_only=True)
        return _pairwise(self._expr, other, lambda a, b: _distance(resolved, a, b), pl.Int64)

    def normalize(
        self,
        preset: Union[str, NormalizationPreset] = "default",
        locale: Optional[Union[str, Locale]] = None,
    ) -> pl.Expr:
        """
        Normalize strings with a preset ("none", "minimal", "default", "aggressive").

        Nulls stay null.

        Example:
            >>> df.with_columns(
            ...     normalized=pl.col("name").strsim.normalize("aggressive")
            ... )
        """

        def normalize_value(value):
            if value is None:
                return None
            return normalize_with_locale(str(value), preset, locale)

        return self._expr.map_elements(normalize_value, return_dtype=pl.Utf8)

    def best_match(self, choices: list[str], **options) -> pl.Expr:
        """
        Find the top suggestion for each value from a list of choices.

        Args:
            choices: Candidate strings
            **options: SuggestionConfig fields (metric, min_score, ...)

        Returns:
            Expression with the best matching choice (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").strsim.best_match(categories, min_score=0.5)
            ... )
        """
        config = with_overrides(None, {**options, "max_suggestions": 1})

        def find_best(value):
            if value is None:
                return None
            results = _rank(str(value), choices, config)
            return results[0].value if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)
