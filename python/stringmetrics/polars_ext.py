"""High-level Polars Series/DataFrame operations for stringmetrics.

Functions in This Module
------------------------
- ``similarity_series()``: Aligned similarity between two Series
- ``distance_series()``: Aligned edit distance between two Series
- ``rank_series()``: Ranked suggestions for every query in a Series

Example Usage
-------------
>>> import polars as pl
>>> import stringmetrics as sm
>>>
>>> queries = pl.Series(["colr", "sise"])
>>> sm.rank_series(queries, ["color", "size", "shape"], min_score=0.5)
"""

from typing import Iterable, Optional, Union

import polars as pl

from stringmetrics._utils import resolve_metric
from stringmetrics.distance import distance as _distance
from stringmetrics.enums import Metric
from stringmetrics.exceptions import ValidationError
from stringmetrics.suggest import SuggestionConfig, rank, with_overrides
from stringmetrics.suggest import score as _score

RANK_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "rank": pl.Int64,
    "value": pl.Utf8,
    "normalized_value": pl.Utf8,
    "score": pl.Float64,
    "candidate_idx": pl.Int64,
}


def _aligned_values(left: "pl.Series", right: "pl.Series"):
    if len(left) != len(right):
        raise ValidationError(
            f"Series must have equal length, got {len(left)} and {len(right)}"
        )
    for a, b in zip(left.to_list(), right.to_list()):
        yield ("" if a is None else str(a)), ("" if b is None else str(b))


def similarity_series(
    left: "pl.Series",
    right: "pl.Series",
    metric: Union[str, Metric] = "jaro_winkler",
) -> "pl.Series":
    """
    Compute similarity between aligned elements of two Series.

    Args:
        left: First Series of strings
        right: Second Series of strings (same length)
        metric: Any metric name or Metric enum

    Returns:
        Float64 Series named "similarity"; nulls are scored as empty strings

    Raises:
        ValidationError: If the Series lengths differ.

    Example:
        >>> similarity_series(pl.Series(["hello"]), pl.Series(["hallo"]), "levenshtein")
    """
    resolved = resolve_metric(metric)
    scores = [_score(a, b, resolved) for a, b in _aligned_values(left, right)]
    return pl.Series("similarity", scores, dtype=pl.Float64)


def distance_series(
    left: "pl.Series",
    right: "pl.Series",
    metric: Union[str, Metric] = "levenshtein",
) -> "pl.Series":
    """
    Compute edit distance between aligned elements of two Series.

    Raises:
        ValidationError: If the Series lengths differ.
        ConfigurationError: If the metric is not an edit distance.
    """
    resolved = resolve_metric(metric, distance_only=True)
    distances = [_distance(resolved, a, b) for a, b in _aligned_values(left, right)]
    return pl.Series("distance", distances, dtype=pl.Int64)


def rank_series(
    queries: "pl.Series",
    candidates: Union["pl.Series", Iterable[str]],
    config: Optional[SuggestionConfig] = None,
    **overrides,
) -> "pl.DataFrame":
    """
    Rank candidates for every query in a Series.

    Args:
        queries: Series of query strings (null queries are skipped)
        candidates: Candidate strings (Series or any iterable); nulls are dropped
            before ranking, so candidate_idx refers to the non-null candidates
        config: Ranking options, see :class:`SuggestionConfig`
        **overrides: SuggestionConfig fields to override

    Returns:
        DataFrame with columns: query_idx, query, rank, value,
        normalized_value, score, candidate_idx. ``rank`` starts at 1.

    Example:
        >>> rank_series(pl.Series(["aple"]), ["apple", "maple"], metric="osa")
    """
    config = with_overrides(config, overrides)
    values = candidates.to_list() if isinstance(candidates, pl.Series) else list(candidates)
    choices = [str(c) for c in values if c is not None]

    rows = []
    for query_idx, query in enumerate(queries.to_list()):
        if query is None:
            continue
        for position, result in enumerate(rank(str(query), choices, config), 1):
            rows.append({
                "query_idx": query_idx,
                "query": str(query),
                "rank": position,
                "value": result.value,
                "normalized_value": result.normalized_value,
                "score": result.score,
                "candidate_idx": result.index,
            })

    return pl.DataFrame(rows, schema=RANK_SCHEMA)


__all__ = ["similarity_series", "distance_series", "rank_series"]
