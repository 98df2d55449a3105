"""Ranked suggestions ("did you mean ...?") built on the similarity metrics.

:func:`rank` normalizes the input and every candidate with the same preset,
scores each candidate with one metric, optionally boosts candidates that
start with the input, then filters, sorts and truncates::

    >>> from stringmetrics import rank
    >>> [s.value for s in rank("colour", ["color", "colour", "cooler"])]
    ['colour', 'color']

Ties are broken by candidate position, so equal inputs always produce the
same ordered output.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from stringmetrics._utils import resolve_metric, resolve_preset
from stringmetrics.distance import similarity as _distance_similarity
from stringmetrics.enums import Locale, Metric, NormalizationPreset
from stringmetrics.exceptions import ConfigurationError
from stringmetrics.fuzz import partial_ratio, ratio
from stringmetrics.jaro import (
    DEFAULT_MAX_PREFIX,
    DEFAULT_PREFIX_SCALE,
    jaro,
    jaro_winkler,
    jaro_winkler_with_params,
)
from stringmetrics.normalization import normalize_with_locale
from stringmetrics.substring import MatchRange, substring_similarity

logger = logging.getLogger(__name__)

PREFIX_BONUS_WEIGHT = 0.1


@dataclass(frozen=True)
class SuggestionConfig:
    """Options for :func:`rank`.

    Attributes:
        min_score: Candidates scoring below this are dropped (0.0-1.0)
        max_suggestions: Maximum number of results
        metric: Scoring metric (name or Metric); names are resolved on creation
        normalize_preset: Preset applied to the input and every candidate. An
            unknown name logs one warning and falls back to "none"
        prefer_prefix: Boost candidates whose normalized form starts with the
            normalized input
        locale: Optional case-folding locale ("tr", "az", "lt")
        jaro_prefix_scale: Prefix scale for the "jaro_winkler" metric
        jaro_max_prefix: Maximum prefix length for the "jaro_winkler" metric

    Raises:
        ConfigurationError: If the metric is unknown or a numeric option is
            out of range.
    """

    min_score: float = 0.6
    max_suggestions: int = 3
    metric: Union[str, Metric] = Metric.LEVENSHTEIN
    normalize_preset: Union[str, NormalizationPreset] = NormalizationPreset.DEFAULT
    prefer_prefix: bool = False
    locale: Optional[Union[str, Locale]] = None
    jaro_prefix_scale: float = DEFAULT_PREFIX_SCALE
    jaro_max_prefix: int = DEFAULT_MAX_PREFIX

    def __post_init__(self):
        object.__setattr__(self, "metric", resolve_metric(self.metric))
        preset = resolve_preset(self.normalize_preset)
        if preset is None:
            logger.warning(
                "Unknown normalization preset %r, candidates are not normalized",
                self.normalize_preset,
            )
            preset = NormalizationPreset.NONE
        object.__setattr__(self, "normalize_preset", preset)
        if not 0.0 <= self.min_score <= 1.0:
            raise ConfigurationError(f"min_score must be in range [0.0, 1.0], got {self.min_score}")
        if self.max_suggestions < 0:
            raise ConfigurationError(
                f"max_suggestions must be non-negative, got {self.max_suggestions}"
            )


@dataclass(frozen=True)
class SuggestionResult:
    """A ranked candidate.

    Attributes:
        value: The candidate exactly as passed in
        normalized_value: The candidate after normalization
        score: Final score (0.0-1.0), including any prefix bonus
        matched_range: Matched range in ``normalized_value`` (substring metric only)
        index: Position of the candidate in the input sequence
        reason: How the score was obtained, e.g. "levenshtein=0.8000, prefix_bonus"
    """

    value: str
    normalized_value: str
    score: float
    matched_range: Optional[MatchRange] = None
    index: int = 0
    reason: str = ""


Scored = Tuple[float, Optional[MatchRange], str]


def _distance_scorer(metric: Metric) -> Callable[[str, str, SuggestionConfig], Scored]:
    def scorer(query: str, candidate: str, config: SuggestionConfig) -> Scored:
        value = _distance_similarity(metric, query, candidate)
        return value, None, f"{metric.value}={value:.4f}"

    return scorer


def _jaro(query: str, candidate: str, config: SuggestionConfig) -> Scored:
    value = jaro(query, candidate)
    return value, None, f"jaro={value:.4f}"


def _jaro_winkler(query: str, candidate: str, config: SuggestionConfig) -> Scored:
    value = jaro_winkler_with_params(
        query, candidate, config.jaro_prefix_scale, config.jaro_max_prefix
    )
    return value, None, (
        f"jaro_winkler(prefix_scale={config.jaro_prefix_scale}, "
        f"max_prefix={config.jaro_max_prefix})={value:.4f}"
    )


def _ratio(query: str, candidate: str, config: SuggestionConfig) -> Scored:
    value = ratio(query, candidate) / 100
    return value, None, f"ratio={value:.4f}"


def _partial_ratio(query: str, candidate: str, config: SuggestionConfig) -> Scored:
    value = partial_ratio(query, candidate) / 100
    return value, None, f"partial_ratio={value:.4f}"


def _substring(query: str, candidate: str, config: SuggestionConfig) -> Scored:
    match = substring_similarity(query, candidate)
    return match.score, match.range, f"substring={match.score:.4f}"


_SCORERS: Dict[Metric, Callable[[str, str, SuggestionConfig], Scored]] = {
    Metric.LEVENSHTEIN: _distance_scorer(Metric.LEVENSHTEIN),
    Metric.OSA: _distance_scorer(Metric.OSA),
    Metric.DAMERAU_LEVENSHTEIN: _distance_scorer(Metric.DAMERAU_LEVENSHTEIN),
    Metric.INDEL: _distance_scorer(Metric.INDEL),
    Metric.LCS_SEQ: _distance_scorer(Metric.LCS_SEQ),
    Metric.JARO: _jaro,
    Metric.JARO_WINKLER: _jaro_winkler,
    Metric.RATIO: _ratio,
    Metric.PARTIAL_RATIO: _partial_ratio,
    Metric.SUBSTRING: _substring,
}

assert set(_SCORERS) == set(Metric), "every metric needs a scorer"

_CONFIG_FIELDS = frozenset(f.name for f in fields(SuggestionConfig))


def with_overrides(config: Optional[SuggestionConfig], overrides: dict) -> SuggestionConfig:
    """Return ``config`` (or a default config) with ``overrides`` applied.

    Raises:
        ConfigurationError: If an override is not a SuggestionConfig field.
    """
    unknown = set(overrides) - _CONFIG_FIELDS
    if unknown:
        raise ConfigurationError(
            f"Unknown suggestion option(s): {sorted(unknown)}. Valid options: {sorted(_CONFIG_FIELDS)}"
        )
    if config is None:
        return SuggestionConfig(**overrides)
    return replace(config, **overrides) if overrides else config


def score(a: str, b: str, metric: Union[str, Metric] = Metric.JARO_WINKLER) -> float:
    """Similarity (0.0-1.0) between two strings with any metric.

    Percentage metrics ("ratio", "partial_ratio") are divided by 100, and
    "substring" returns the longest-common-substring score. "jaro_winkler"
    is the canonical form, with the prefix bonus only above a Jaro score of
    0.7; :func:`rank` uses the configurable, unconditional bonus instead.

    Raises:
        ConfigurationError: If the metric is unknown.

    Example:
        >>> score("hello", "hallo", "levenshtein")
        0.8
    """
    resolved = resolve_metric(metric)
    if resolved is Metric.JARO_WINKLER:
        return jaro_winkler(a, b)
    return _SCORERS[resolved](a, b, SuggestionConfig(metric=resolved))[0]


def rank(
    input: str,
    candidates: Sequence[str],
    config: Optional[SuggestionConfig] = None,
    **overrides,
) -> List[SuggestionResult]:
    """Rank candidates by similarity to ``input``.

    Args:
        input: The (possibly misspelled) string to find suggestions for
        candidates: Candidate strings, in priority order for ties
        config: Ranking options; defaults to ``SuggestionConfig()``
        **overrides: SuggestionConfig fields to override, e.g. ``metric="osa"``

    Returns:
        At most ``max_suggestions`` results with ``score >= min_score``,
        sorted by score (highest first), ties by candidate position.

    Raises:
        ConfigurationError: On an unknown metric or option.

    Example:
        >>> results = rank("appel", ["apple", "apply", "banana"], min_score=0.5)
        >>> [(r.value, round(r.score, 2)) for r in results]
        [('apple', 0.6), ('apply', 0.6)]
    """
    config = with_overrides(config, overrides)
    scorer = _SCORERS[config.metric]
    logger.debug(
        "Ranking %d candidates with metric=%s preset=%s",
        len(candidates), config.metric.value, config.normalize_preset,
    )

    query = normalize_with_locale(input, config.normalize_preset, config.locale)

    results: List[SuggestionResult] = []
    for index, candidate in enumerate(candidates):
        normalized = normalize_with_locale(candidate, config.normalize_preset, config.locale)
        value, matched_range, reason = scorer(query, normalized, config)

        if config.prefer_prefix and normalized.startswith(query):
            value = min(1.0, value + (1.0 - value) * PREFIX_BONUS_WEIGHT)
            reason += ", prefix_bonus"

        if value < config.min_score:
            continue

        results.append(SuggestionResult(
            value=candidate,
            normalized_value=normalized,
            score=value,
            matched_range=matched_range,
            index=index,
            reason=reason,
        ))

    results.sort(key=lambda result: (-result.score, result.index))
    return results[:config.max_suggestions]


suggest = rank


__all__ = ["SuggestionConfig", "SuggestionResult", "rank", "suggest", "score", "with_overrides"]
