"""Batch operations API for stringmetrics.

This module provides list-based batch helpers built on the single-pair
scorers. Every function accepts any metric name understood by
:func:`stringmetrics.score` and returns freshly allocated lists.

Example usage:
    >>> import stringmetrics.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "hello", metric="levenshtein")
    >>> [(r.text, r.score) for r in results]
    [('hello', 1.0), ('hallo', 0.8), ('world', 0.19999999999999996)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", metric="osa", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"], metric="levenshtein")
    [0.8, 0.8]

    # Full distance matrix
    >>> batch.distance_matrix(["hello", "world"], ["hallo", "word", "help"])
    [[1, 5, 2], [4, 1, 4]]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stringmetrics._utils import resolve_metric
from stringmetrics.distance import distance as _distance
from stringmetrics.exceptions import ValidationError
from stringmetrics.suggest import score as _score

if TYPE_CHECKING:
    from stringmetrics.enums import Metric

__all__ = [
    "MatchResult",
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
    "distance_matrix",
]


@dataclass(frozen=True)
class MatchResult:
    """Result from batch similarity operations.

    Attributes:
        text: The compared string
        score: Similarity score (0.0-1.0)
        id: Position of ``text`` in the input list
    """

    text: str
    score: float
    id: int


def similarity(
    strings: list[str],
    query: str,
    metric: str | Metric = "jaro_winkler",
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Results are returned in the same order as the input strings; strings
    are compared as-is, without normalization.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        metric: Any metric name or Metric enum (default "jaro_winkler").

    Returns:
        List of MatchResult objects where ``id`` is the original index.
    """
    resolved = resolve_metric(metric)
    return [MatchResult(text, _score(query, text, resolved), i) for i, text in enumerate(strings)]


def best_matches(
    strings: list[str],
    query: str,
    metric: str | Metric = "jaro_winkler",
    limit: int = 5,
    min_score: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Unlike :func:`stringmetrics.rank`, no normalization or prefix bonus is
    applied. Ties keep the input order.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        metric: Any metric name or Metric enum (default "jaro_winkler").
        limit: Maximum number of results to return (default: 5).
        min_score: Minimum similarity score to include in results.

    Returns:
        List of MatchResult objects sorted by score descending.
    """
    results = [r for r in similarity(strings, query, metric) if r.score >= min_score]
    results.sort(key=lambda r: (-r.score, r.id))
    return results[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    metric: str | Metric = "jaro_winkler",
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    resolved = resolve_metric(metric)
    return [_score(a, b, resolved) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    metric: str | Metric = "levenshtein",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].
    """
    resolved = resolve_metric(metric)
    return [[_score(q, c, resolved) for c in choices] for q in queries]


def distance_matrix(
    queries: list[str],
    choices: list[str],
    metric: str | Metric = "levenshtein",
) -> list[list[int]]:
    """Compute the raw edit-distance matrix between all queries and all choices.

    Raises:
        ConfigurationError: If ``metric`` is not an edit distance.
    """
    resolved = resolve_metric(metric, distance_only=True)
    return [[_distance(resolved, q, c) for c in choices] for q in queries]
