"""Unicode normalization and locale-aware case folding.

Presets, from lightest to heaviest:

- ``none``: identity
- ``minimal``: trim, then NFC
- ``default``: case-fold, trim, then NFC
- ``aggressive``: case-fold, NFKD, strip diacritics, keep only
  alphanumerics and whitespace, trim

Trimming and the whitespace filter use the Unicode White_Space property, so
the C0 separators U+001C..U+001F are not whitespace. Letters, numbers and
spacing combining marks (Devanagari and Bengali vowel signs) count as
alphanumeric.

Case folding lowercases one character at a time (so a final capital sigma
becomes 'σ', never 'ς'), with these exceptions:

- 'ß' always folds to 'ss'
- 'İ' folds to 'i' + U+0307 COMBINING DOT ABOVE, or to plain 'i' under the
  Turkish and Azerbaijani locales
- 'I' folds to dotless 'ı' under the Turkish and Azerbaijani locales

Lithuanian is accepted as a locale but uses the default table; its
accent-context rules are not implemented.

Example:
    >>> from stringmetrics import normalize
    >>> normalize("  ISTANBUL ", "default", locale="tr")
    'ıstanbul'
"""

import logging
import unicodedata
from typing import Optional, Union

from stringmetrics._utils import resolve_locale, resolve_preset
from stringmetrics.enums import Locale, NormalizationPreset

logger = logging.getLogger(__name__)

_TURKIC = frozenset({Locale.TURKISH, Locale.AZERBAIJANI})

_COMBINING_DOT_ABOVE = "\u0307"


def _fold_char(ch: str, turkic: bool) -> str:
    if ch == "İ":  # LATIN CAPITAL LETTER I WITH DOT ABOVE
        return "i" if turkic else "i" + _COMBINING_DOT_ABOVE
    if ch == "ß":
        return "ss"
    if turkic and ch == "I":
        return "ı"  # dotless i
    return ch.lower()


def case_fold(value: str, locale: Union[str, Locale, None] = None) -> str:
    """Lowercase ``value`` character by character using the locale's table.

    Args:
        value: String to fold.
        locale: Optional locale ("tr", "az", "lt"). Anything else, or None,
            uses the default table.

    Returns:
        The folded string. It may be longer than the input ('ß' -> 'ss').
    """
    turkic = resolve_locale(locale) in _TURKIC
    return "".join(_fold_char(ch, turkic) for ch in value)


# Characters with the Unicode White_Space property.
_WHITE_SPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)


def _trim(value: str) -> str:
    return value.strip(_WHITE_SPACE)


def _is_alphanumeric(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category[0] in "LN" or category == "Mc"


def _strip_diacritics(value: str) -> str:
    return "".join(ch for ch in value if unicodedata.category(ch) != "Mn")


def normalize_with_locale(
    value: str,
    preset: Union[str, NormalizationPreset] = NormalizationPreset.NONE,
    locale: Union[str, Locale, None] = None,
) -> str:
    """Normalize a string with the given preset and optional locale.

    Args:
        value: The string to normalize.
        preset: One of "none", "minimal", "default", "aggressive". An
            unrecognized preset name returns ``value`` unchanged so that
            callers written against newer preset names keep working; a
            warning is logged.
        locale: Optional locale for case folding ("tr", "az", "lt").

    Returns:
        The normalized string.
    """
    resolved = resolve_preset(preset)

    if resolved is None:
        logger.warning("Unknown normalization preset %r, returning input unchanged", preset)
        return value

    if resolved is NormalizationPreset.NONE:
        return value

    if resolved is NormalizationPreset.MINIMAL:
        return unicodedata.normalize("NFC", _trim(value))

    if resolved is NormalizationPreset.DEFAULT:
        return unicodedata.normalize("NFC", _trim(case_fold(value, locale)))

    # aggressive
    decomposed = unicodedata.normalize("NFKD", case_fold(value, locale))
    kept = "".join(
        ch for ch in _strip_diacritics(decomposed) if _is_alphanumeric(ch) or ch in _WHITE_SPACE
    )
    return _trim(kept)


def normalize(
    value: str,
    preset: Union[str, NormalizationPreset] = NormalizationPreset.NONE,
    locale: Optional[Union[str, Locale]] = None,
) -> str:
    """Normalize a string using the specified preset.

    Same as :func:`normalize_with_locale`; ``locale`` defaults to the
    locale-independent case-folding table.

    Example:
        >>> normalize("  Straße  ", "default")
        'strasse'
        >>> normalize("Crème  Brûlée!", "aggressive")
        'creme  brulee'
    """
    return normalize_with_locale(value, preset, locale)


__all__ = ["normalize", "normalize_with_locale", "case_fold"]
