"""Edit-distance metrics.

Every metric works on code points (Python ``str`` indexing) and comes in
three flavours::

    levenshtein(a, b)             -> int distance
    levenshtein_similarity(a, b)  -> float in [0, 1]
    levenshtein_result(a, b)      -> DistanceResult(distance, normalized_similarity)

Normalized similarity is ``1 - distance / max_distance``, where
``max_distance`` is the largest distance the metric can produce for the two
lengths: ``max(m, n)`` for Levenshtein, OSA and Damerau-Levenshtein, and
``m + n`` for Indel and LCS-sequence. Two empty strings have similarity 1.0.

Use :func:`distance`, :func:`similarity` and :func:`distance_result` to
select the metric by name.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple, Union

from stringmetrics._utils import resolve_metric
from stringmetrics.enums import DISTANCE_METRICS, Metric


@dataclass(frozen=True)
class DistanceResult:
    """Distance between two strings and its normalized similarity.

    Attributes:
        distance: Number of edit operations (never negative)
        normalized_similarity: Similarity score (0.0-1.0), 1.0 meaning identical
    """

    distance: int
    normalized_similarity: float


def _normalized_similarity(dist: int, max_dist: int) -> float:
    if max_dist == 0:
        return 1.0
    return 1.0 - dist / max_dist


def _trim_common_affix(a: str, b: str) -> Tuple[str, str]:
    """Drop the shared prefix and suffix; they never change Levenshtein or LCS results."""
    limit = min(len(a), len(b))
    start = 0
    while start < limit and a[start] == b[start]:
        start += 1
    end = 0
    while end < limit - start and a[-1 - end] == b[-1 - end]:
        end += 1
    return a[start:len(a) - end], b[start:len(b) - end]


# -----------------------------------------------------------------------------
# Levenshtein
# -----------------------------------------------------------------------------


def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and substitutions.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    a, b = _trim_common_affix(a, b)
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


def levenshtein_similarity(a: str, b: str) -> float:
    return _normalized_similarity(levenshtein(a, b), max(len(a), len(b)))


def levenshtein_result(a: str, b: str) -> DistanceResult:
    return distance_result(Metric.LEVENSHTEIN, a, b)


# -----------------------------------------------------------------------------
# Optimal String Alignment (restricted Damerau-Levenshtein)
# -----------------------------------------------------------------------------


def osa(a: str, b: str) -> int:
    """Levenshtein distance plus adjacent transpositions, no substring edited twice.

    Example:
        >>> osa("ca", "ac")
        1
        >>> osa("CA", "ABC")
        3
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Rows i-2 and i-1 of the (m+1) x (n+1) table
    before: List[int] = []
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            cell = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            )
            if i > 1 and j > 1 and ca == b[j - 2] and a[i - 2] == cb:
                cell = min(cell, before[j - 2] + 1)
            current.append(cell)
        before, previous = previous, current
    return previous[-1]


def osa_similarity(a: str, b: str) -> float:
    return _normalized_similarity(osa(a, b), max(len(a), len(b)))


def osa_result(a: str, b: str) -> DistanceResult:
    return distance_result(Metric.OSA, a, b)


# -----------------------------------------------------------------------------
# Unrestricted Damerau-Levenshtein
# -----------------------------------------------------------------------------


def damerau_levenshtein(a: str, b: str) -> int:
    """True edit distance with transpositions, including non-adjacent edits between them.

    Uses the Lowrance-Wagner algorithm: for every character, the last row in
    ``a`` where it occurred is remembered so that a transposition can be
    priced together with the edits between the transposed characters.

    Example:
        >>> damerau_levenshtein("CA", "ABC")
        2
    """
    m, n = len(a), len(b)
    if not m:
        return n
    if not n:
        return m

    sentinel = m + n
    # Table offset by one so that row/column 0 hold the sentinel
    table = [[sentinel] * (n + 2)]
    table += [[sentinel, i] + [0] * n for i in range(m + 1)]
    table[1][1:] = list(range(n + 1))

    last_row: Dict[str, int] = {}
    for i in range(1, m + 1):
        ca = a[i - 1]
        last_match_col = 0
        for j in range(1, n + 1):
            cb = b[j - 1]
            k = last_row.get(cb, 0)
            l = last_match_col
            if ca == cb:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            table[i + 1][j + 1] = min(
                table[i][j] + cost,
                table[i + 1][j] + 1,
                table[i][j + 1] + 1,
                table[k][l] + (i - k - 1) + 1 + (j - l - 1),
            )
        last_row[ca] = i
    return table[m + 1][n + 1]


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    return _normalized_similarity(damerau_levenshtein(a, b), max(len(a), len(b)))


def damerau_levenshtein_result(a: str, b: str) -> DistanceResult:
    return distance_result(Metric.DAMERAU_LEVENSHTEIN, a, b)


# -----------------------------------------------------------------------------
# Longest Common Subsequence / Indel
# -----------------------------------------------------------------------------


def lcs_seq_length(a: str, b: str) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    trimmed_a, trimmed_b = _trim_common_affix(a, b)
    affix = len(a) - len(trimmed_a)
    if not trimmed_a or not trimmed_b:
        return affix

    previous = [0] * (len(trimmed_b) + 1)
    for ca in trimmed_a:
        current = [0]
        for j, cb in enumerate(trimmed_b, 1):
            if ca == cb:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return affix + previous[-1]


def indel(a: str, b: str) -> int:
    """Minimum number of insertions and deletions, ``m + n - 2 * LCS``.

    Example:
        >>> indel("kitten", "sitting")
        5
    """
    return len(a) + len(b) - 2 * lcs_seq_length(a, b)


def indel_similarity(a: str, b: str) -> float:
    return _normalized_similarity(indel(a, b), len(a) + len(b))


def indel_result(a: str, b: str) -> DistanceResult:
    return distance_result(Metric.INDEL, a, b)


def lcs_seq(a: str, b: str) -> int:
    """LCS-sequence distance; the same value as :func:`indel`."""
    return indel(a, b)


def lcs_seq_similarity(a: str, b: str) -> float:
    """LCS-sequence similarity, normalized the way Indel is: ``1 - d / (m + n)``.

    This equals ``2 * L / (m + n)`` for an LCS of length ``L``, not
    ``L / max(m, n)``. Use :func:`lcs_seq_length` for the raw ``L``.

    Example:
        >>> lcs_seq_similarity("abcd", "ab")
        0.6666666666666667
    """
    return indel_similarity(a, b)


def lcs_seq_result(a: str, b: str) -> DistanceResult:
    return distance_result(Metric.LCS_SEQ, a, b)


# -----------------------------------------------------------------------------
# Dispatch by metric name
# -----------------------------------------------------------------------------


def _longest(a: str, b: str) -> int:
    return max(len(a), len(b))


def _total(a: str, b: str) -> int:
    return len(a) + len(b)


# Metric -> (distance function, maximum possible distance for the pair)
_DISTANCES: Dict[Metric, Tuple[Callable[[str, str], int], Callable[[str, str], int]]] = {
    Metric.LEVENSHTEIN: (levenshtein, _longest),
    Metric.OSA: (osa, _longest),
    Metric.DAMERAU_LEVENSHTEIN: (damerau_levenshtein, _longest),
    Metric.INDEL: (indel, _total),
    Metric.LCS_SEQ: (lcs_seq, _total),
}

assert set(_DISTANCES) == DISTANCE_METRICS, "every distance metric needs an implementation"


def distance_result(metric: Union[str, Metric], a: str, b: str) -> DistanceResult:
    """Compute a DistanceResult with the named metric.

    Args:
        metric: One of "levenshtein", "osa", "damerau_levenshtein", "indel",
            "lcs_seq" (or an alias such as "damerau_osa")
        a: First string
        b: Second string

    Raises:
        ConfigurationError: If the metric is unknown or not an edit distance.
    """
    resolved = resolve_metric(metric, distance_only=True)
    distance_func, max_distance = _DISTANCES[resolved]
    dist = distance_func(a, b)
    assert dist >= 0, f"{resolved.value} produced a negative distance for {a!r}, {b!r}"
    return DistanceResult(dist, _normalized_similarity(dist, max_distance(a, b)))


def distance(metric: Union[str, Metric], a: str, b: str) -> int:
    """Edit distance between ``a`` and ``b`` with the named metric.

    Example:
        >>> distance("osa", "ca", "ac")
        1
    """
    return distance_result(metric, a, b).distance


def similarity(metric: Union[str, Metric], a: str, b: str) -> float:
    """Normalized similarity (0.0-1.0) between ``a`` and ``b`` with the named metric.

    Example:
        >>> similarity("levenshtein", "hello", "hallo")
        0.8
    """
    return distance_result(metric, a, b).normalized_similarity


__all__ = [
    "DistanceResult",
    "levenshtein",
    "levenshtein_similarity",
    "levenshtein_result",
    "osa",
    "osa_similarity",
    "osa_result",
    "damerau_levenshtein",
    "damerau_levenshtein_similarity",
    "damerau_levenshtein_result",
    "indel",
    "indel_similarity",
    "indel_result",
    "lcs_seq",
    "lcs_seq_length",
    "lcs_seq_similarity",
    "lcs_seq_result",
    "distance",
    "similarity",
    "distance_result",
]
