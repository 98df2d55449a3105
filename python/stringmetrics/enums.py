"""Enums for stringmetrics API."""

from enum import Enum


class Metric(str, Enum):
    """Available metrics.

    The first five members are edit distances and can be used with
    ``distance()`` and ``similarity()``; every member can be used for
    ranking suggestions. String values are accepted anywhere a Metric is.

    Example:
        >>> from stringmetrics import Metric, rank
        >>> rank("helo", ["hello", "help"], metric=Metric.OSA)
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    OSA = "osa"
    """Optimal String Alignment: Levenshtein plus adjacent transpositions, no substring edited twice"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Unrestricted Damerau-Levenshtein (e.g., 'CA' -> 'ABC' is 2 edits)"""

    INDEL = "indel"
    """Insertions and deletions only"""

    LCS_SEQ = "lcs_seq"
    """Longest Common Subsequence distance (same value as Indel)"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    RATIO = "ratio"
    """Indel similarity on a 0-100 scale (divided by 100 when ranking)"""

    PARTIAL_RATIO = "partial_ratio"
    """Best ratio of the shorter string against windows of the longer one"""

    SUBSTRING = "substring"
    """Longest common substring score, reports the matched range"""

    @property
    def is_distance(self) -> bool:
        """True for the edit-distance metrics."""
        return self in DISTANCE_METRICS


DISTANCE_METRICS = frozenset({
    Metric.LEVENSHTEIN,
    Metric.OSA,
    Metric.DAMERAU_LEVENSHTEIN,
    Metric.INDEL,
    Metric.LCS_SEQ,
})


class NormalizationPreset(str, Enum):
    """String normalization presets.

    Example:
        >>> from stringmetrics import normalize, NormalizationPreset
        >>> normalize("  Crème Brûlée! ", NormalizationPreset.AGGRESSIVE)
        'creme brulee'
    """

    NONE = "none"
    """Return the input unchanged"""

    MINIMAL = "minimal"
    """Trim surrounding whitespace, then NFC"""

    DEFAULT = "default"
    """Case-fold, trim, then NFC"""

    AGGRESSIVE = "aggressive"
    """Case-fold, NFKD, strip diacritics and punctuation, trim"""


class Locale(str, Enum):
    """Locales with dedicated case-folding rules."""

    TURKISH = "tr"
    """Dotted/dotless I: 'I' -> 'ı', 'İ' -> 'i'"""

    AZERBAIJANI = "az"
    """Same rules as Turkish"""

    LITHUANIAN = "lt"
    """Accepted, folds with the default table"""


__all__ = ["Metric", "DISTANCE_METRICS", "NormalizationPreset", "Locale"]
