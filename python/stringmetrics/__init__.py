"""
stringmetrics - String similarity metrics, normalization and suggestion ranking

A pure-Python library of edit distances, similarity scorers, a Unicode-aware
normalizer and a deterministic "did you mean" ranker. All positions and
lengths are counted in code points.

Example usage:
    >>> import stringmetrics as sm

    # Edit distances
    >>> sm.levenshtein("kitten", "sitting")
    3
    >>> sm.distance("damerau_levenshtein", "CA", "ABC")
    2

    # Similarity scores
    >>> round(sm.jaro_winkler("MARTHA", "MARHTA"), 3)
    0.961

    # Longest common substring
    >>> match = sm.substring_similarity("cat", "concatenate")
    >>> tuple(match.range)
    (3, 6)

    # Suggestions
    >>> [s.value for s in sm.rank("Straße", ["strasse", "street"])]
    ['strasse']
"""

import logging
from importlib.metadata import version as _get_version

# Register the .strsim expression namespace
import stringmetrics.expr  # noqa: F401

# Import submodules for `from stringmetrics import batch, polars` style
from stringmetrics import batch, polars
from stringmetrics.distance import (
    DistanceResult,
    damerau_levenshtein,
    damerau_levenshtein_result,
    damerau_levenshtein_similarity,
    distance,
    distance_result,
    indel,
    indel_result,
    indel_similarity,
    lcs_seq,
    lcs_seq_length,
    lcs_seq_result,
    lcs_seq_similarity,
    levenshtein,
    levenshtein_result,
    levenshtein_similarity,
    osa,
    osa_result,
    osa_similarity,
    similarity,
)
from stringmetrics.enums import Locale, Metric, NormalizationPreset
from stringmetrics.exceptions import ConfigurationError, StringMetricsError, ValidationError
from stringmetrics.fuzz import partial_ratio, ratio
from stringmetrics.jaro import jaro, jaro_winkler, jaro_winkler_with_params
from stringmetrics.normalization import case_fold, normalize, normalize_with_locale
from stringmetrics.polars_ext import distance_series, rank_series, similarity_series
from stringmetrics.substring import (
    MatchRange,
    SubstringMatch,
    longest_common_substring,
    substring_similarity,
)
from stringmetrics.suggest import (
    SuggestionConfig,
    SuggestionResult,
    rank,
    score,
    suggest,
    with_overrides,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("stringmetrics")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "StringMetricsError",
    "ValidationError",
    "ConfigurationError",
    # Result types
    "DistanceResult",
    "MatchRange",
    "SubstringMatch",
    "SuggestionConfig",
    "SuggestionResult",
    # Enums
    "Metric",
    "NormalizationPreset",
    "Locale",
    # Distance functions
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
    # Dispatch by metric name
    "distance",
    "similarity",
    "distance_result",
    "score",
    # Similarity scorers
    "jaro",
    "jaro_winkler",
    "jaro_winkler_with_params",
    "ratio",
    "partial_ratio",
    # Normalization
    "normalize",
    "normalize_with_locale",
    "case_fold",
    # Substring matching
    "substring_similarity",
    "longest_common_substring",
    # Suggestions
    "rank",
    "suggest",
    "with_overrides",
    # Polars integration
    "similarity_series",
    "distance_series",
    "rank_series",
    "batch",
    "polars",
]
