"""Longest common substring matching."""

from dataclasses import dataclass
from typing import Iterator, Optional

from stringmetrics.exceptions import ValidationError


@dataclass(frozen=True)
class MatchRange:
    """Half-open ``[start, end)`` range of code-point offsets."""

    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end:
            raise ValidationError(f"Invalid range [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def __iter__(self) -> Iterator[int]:
        return iter((self.start, self.end))

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass(frozen=True)
class SubstringMatch:
    """Result of :func:`substring_similarity`.

    Attributes:
        score: ``2 * match_length / (len(needle) + len(haystack))``, 0.0 without overlap
        range: Matched range in the haystack, None when score is 0
        needle_range: Matched range in the needle, None when score is 0
    """

    score: float
    range: Optional[MatchRange] = None
    needle_range: Optional[MatchRange] = None


def substring_similarity(needle: str, haystack: str) -> SubstringMatch:
    """Score two strings by their longest common substring.

    Among several longest substrings the first one found scanning the needle
    left to right (and the haystack left to right within each needle
    position) wins.

    Example:
        >>> match = substring_similarity("cat", "concatenate")
        >>> round(match.score, 6), tuple(match.range)
        (0.428571, (3, 6))
    """
    m, n = len(needle), len(haystack)
    if not m or not n:
        return SubstringMatch(0.0)

    best_len = 0
    best_end_needle = 0
    best_end_haystack = 0

    # previous[j]: length of the common substring ending at needle[i - 2], haystack[j - 1]
    previous = [0] * (n + 1)
    for i in range(1, m + 1):
        current = [0] * (n + 1)
        ch = needle[i - 1]
        for j in range(1, n + 1):
            if ch == haystack[j - 1]:
                length = previous[j - 1] + 1
                current[j] = length
                if length > best_len:
                    best_len = length
                    best_end_needle = i
                    best_end_haystack = j
        previous = current

    if not best_len:
        return SubstringMatch(0.0)

    return SubstringMatch(
        score=2 * best_len / (m + n),
        range=MatchRange(best_end_haystack - best_len, best_end_haystack),
        needle_range=MatchRange(best_end_needle - best_len, best_end_needle),
    )


def longest_common_substring(a: str, b: str) -> str:
    """The longest substring shared by ``a`` and ``b`` ("" if none).

    Example:
        >>> longest_common_substring("cat", "concatenate")
        'cat'
    """
    match = substring_similarity(a, b)
    return match.range.slice(b) if match.range is not None else ""


__all__ = ["MatchRange", "SubstringMatch", "substring_similarity", "longest_common_substring"]
