"""Percentage-scale (0-100) scorers compatible with RapidFuzz's ``fuzz`` module."""

from stringmetrics.distance import indel_similarity


def ratio(a: str, b: str) -> float:
    """Indel normalized similarity on a 0-100 scale.

    Example:
        >>> round(ratio("kitten", "sitting"), 2)
        61.54
    """
    return indel_similarity(a, b) * 100


def partial_ratio(a: str, b: str) -> float:
    """Best :func:`ratio` of the shorter string against same-length windows of the longer.

    Returns 100 when the shorter string occurs in the longer one. When either
    string is empty the result is 100 if both are empty, else 0.

    Example:
        >>> partial_ratio("cat", "concatenate")
        100.0
    """
    if not a or not b:
        return 100.0 if a == b else 0.0

    shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
    if shorter in longer:
        return 100.0

    width = len(shorter)
    return max(
        ratio(shorter, longer[start:start + width])
        for start in range(len(longer) - width + 1)
    )


__all__ = ["ratio", "partial_ratio"]
