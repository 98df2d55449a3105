"""Internal utilities for stringmetrics."""

import logging
from typing import Optional, Union

from stringmetrics.enums import DISTANCE_METRICS, Locale, Metric, NormalizationPreset
from stringmetrics.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _compact(name: str) -> str:
    # "damerau_levenshtein", "damerauLevenshtein" and "Damerau-Levenshtein" share a key
    return name.replace("_", "").replace("-", "").lower()


# Compacted names (see _compact) mapped to metrics, including aliases
METRIC_ALIASES = {
    **{_compact(m.value): m for m in Metric},
    "damerauosa": Metric.OSA,
    "damerauunrestricted": Metric.DAMERAU_LEVENSHTEIN,
    "damerau": Metric.DAMERAU_LEVENSHTEIN,
    "lcs": Metric.LCS_SEQ,
}

VALID_METRICS = frozenset(m.value for m in Metric)
VALID_DISTANCE_METRICS = frozenset(m.value for m in DISTANCE_METRICS)


def resolve_metric(metric: Union[str, Metric], distance_only: bool = False) -> Metric:
    """Convert a metric name or Metric enum to a Metric member.

    Args:
        metric: Either a Metric enum value or a metric name. Names are matched
            case-insensitively and accept the aliases ``damerau_osa``,
            ``damerau_unrestricted`` and camelCase spellings.
        distance_only: Reject metrics that are not edit distances.

    Returns:
        The resolved Metric.

    Raises:
        ConfigurationError: If the name is not recognized, or names a
            non-distance metric while ``distance_only`` is set.

    Example:
        >>> resolve_metric("damerauOsa")
        <Metric.OSA: 'osa'>
    """
    if isinstance(metric, Metric):
        resolved = metric
    elif isinstance(metric, str):
        resolved = METRIC_ALIASES.get(_compact(metric))
        if resolved is None:
            valid = VALID_DISTANCE_METRICS if distance_only else VALID_METRICS
            raise ConfigurationError(
                f"Unknown metric: '{metric}'. Valid options: {sorted(valid)}"
            )
    else:
        raise ConfigurationError(
            f"metric must be str or Metric enum, got {type(metric).__name__}"
        )

    if distance_only and not resolved.is_distance:
        raise ConfigurationError(
            f"'{resolved.value}' is not a distance metric. "
            f"Valid options: {sorted(VALID_DISTANCE_METRICS)}"
        )
    return resolved


def resolve_preset(preset: Union[str, NormalizationPreset]) -> Optional[NormalizationPreset]:
    """Convert a preset name to a NormalizationPreset, or None if unrecognized."""
    if isinstance(preset, NormalizationPreset):
        return preset
    try:
        return NormalizationPreset(str(preset).lower())
    except ValueError:
        return None


def resolve_locale(locale: Union[str, Locale, None]) -> Optional[Locale]:
    """Convert a locale tag to a Locale, or None for absent/unsupported locales.

    Region subtags are ignored, so ``"tr-TR"`` and ``"az_Latn"`` resolve too.
    """
    if locale is None or isinstance(locale, Locale):
        return locale
    language = str(locale).replace("_", "-").split("-", 1)[0].lower()
    try:
        return Locale(language)
    except ValueError:
        logger.debug("No case-folding rules for locale %r, using the default table", locale)
        return None


def clamp(value, low, high):
    return max(low, min(high, value))


__all__ = [
    "resolve_metric",
    "resolve_preset",
    "resolve_locale",
    "clamp",
    "METRIC_ALIASES",
    "VALID_METRICS",
    "VALID_DISTANCE_METRICS",
]
