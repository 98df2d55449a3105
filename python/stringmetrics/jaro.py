"""Jaro and Jaro-Winkler similarity."""

from typing import List

from stringmetrics._utils import clamp

DEFAULT_PREFIX_SCALE = 0.1
DEFAULT_MAX_PREFIX = 4

MAX_PREFIX_SCALE = 0.25
MAX_PREFIX_LIMIT = 8

# jaro_winkler only boosts pairs whose Jaro score exceeds this.
BOOST_THRESHOLD = 0.7


def jaro(a: str, b: str) -> float:
    """Jaro similarity (0.0-1.0).

    Characters match when they are equal and no further apart than
    ``max(len(a), len(b)) // 2 - 1`` positions. Transpositions are half the
    number of matched characters that appear in a different order.

    Example:
        >>> round(jaro("MARTHA", "MARHTA"), 4)
        0.9444
    """
    len_a, len_b = len(a), len(b)
    if not len_a and not len_b:
        return 1.0
    if not len_a or not len_b:
        return 0.0

    window = max(0, max(len_a, len_b) // 2 - 1)
    b_flags = [False] * len_b
    a_matched: List[str] = []

    for i, ca in enumerate(a):
        for j in range(max(0, i - window), min(len_b, i + window + 1)):
            if not b_flags[j] and b[j] == ca:
                b_flags[j] = True
                a_matched.append(ca)
                break

    matches = len(a_matched)
    if not matches:
        return 0.0

    b_matched = [cb for cb, flag in zip(b, b_flags) if flag]
    transpositions = sum(ca != cb for ca, cb in zip(a_matched, b_matched)) // 2

    return (matches / len_a + matches / len_b + (matches - transpositions) / matches) / 3.0


def jaro_winkler_with_params(a: str, b: str, prefix_scale: float, max_prefix: int) -> float:
    """Jaro-Winkler similarity with explicit prefix parameters.

    Args:
        a: First string
        b: Second string
        prefix_scale: Weight of each common prefix character, clamped to [0, 0.25]
        max_prefix: Longest prefix that earns a bonus, clamped to [1, 8]

    Returns:
        ``jaro + prefix_len * prefix_scale * (1 - jaro)``, capped at 1.0.
    """
    scale = clamp(float(prefix_scale), 0.0, MAX_PREFIX_SCALE)
    limit = clamp(int(max_prefix), 1, MAX_PREFIX_LIMIT)
    return _winkler_boost(a, b, jaro(a, b), scale, limit)


def _winkler_boost(a: str, b: str, jaro_score: float, scale: float, limit: int) -> float:
    if jaro_score == 1.0:
        return 1.0

    prefix_len = 0
    for ca, cb in zip(a, b):
        if ca != cb or prefix_len >= limit:
            break
        prefix_len += 1

    return min(1.0, jaro_score + prefix_len * scale * (1.0 - jaro_score))


def jaro_winkler(a: str, b: str) -> float:
    """Jaro-Winkler similarity with the conventional prefix_scale=0.1 and max_prefix=4.

    The prefix bonus only applies when the Jaro score is above 0.7, so weak
    pairs that happen to share a prefix are not pulled up. Use
    :func:`jaro_winkler_with_params` for an unconditional bonus.

    Example:
        >>> round(jaro_winkler("MARTHA", "MARHTA"), 3)
        0.961
        >>> jaro_winkler("abxyz", "abqrs") == jaro("abxyz", "abqrs")
        True
    """
    jaro_score = jaro(a, b)
    if jaro_score <= BOOST_THRESHOLD:
        return jaro_score
    return _winkler_boost(a, b, jaro_score, DEFAULT_PREFIX_SCALE, DEFAULT_MAX_PREFIX)


__all__ = ["jaro", "jaro_winkler", "jaro_winkler_with_params"]
