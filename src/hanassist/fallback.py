"""Locale fallback chains.

Maps a requested locale to the ordered list of candidate keys probed during
election. Every chain, including the default one, is a permutation of all ten
candidate keys, so any non-empty candidate mapping can always be resolved.

Python 3.13+.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from hanassist.enums import CandidateKey
from hanassist.locale_utils import normalize_locale, split_locale

if TYPE_CHECKING:
    from hanassist.types import LocaleCode

__all__ = [
    "DEFAULT_FALLBACK",
    "FALLBACK_TABLE",
    "fallback_locale",
    "fallback_order",
]

logger = logging.getLogger(__name__)

type FallbackChain = tuple[CandidateKey, ...]

_K = CandidateKey

# Locales without a row use the enumeration order: universal form first,
# then generic Chinese, scripts, and regions.
DEFAULT_FALLBACK: FallbackChain = tuple(CandidateKey)

FALLBACK_TABLE: MappingProxyType[str, FallbackChain] = MappingProxyType({
    "zh": (_K.ZH, _K.HANS, _K.HANT, _K.CN, _K.TW, _K.HK, _K.SG, _K.MO, _K.MY, _K.EN),
    "zh-hans": (_K.HANS, _K.CN, _K.SG, _K.MY, _K.ZH, _K.HANT, _K.TW, _K.HK, _K.MO, _K.EN),
    "zh-hant": (_K.HANT, _K.TW, _K.HK, _K.MO, _K.ZH, _K.HANS, _K.CN, _K.SG, _K.MY, _K.EN),
    "zh-cn": (_K.CN, _K.HANS, _K.SG, _K.MY, _K.ZH, _K.HANT, _K.TW, _K.HK, _K.MO, _K.EN),
    "zh-sg": (_K.SG, _K.HANS, _K.CN, _K.MY, _K.ZH, _K.HANT, _K.TW, _K.HK, _K.MO, _K.EN),
    "zh-my": (_K.MY, _K.HANS, _K.CN, _K.SG, _K.ZH, _K.HANT, _K.TW, _K.HK, _K.MO, _K.EN),
    "zh-tw": (_K.TW, _K.HANT, _K.HK, _K.MO, _K.ZH, _K.HANS, _K.CN, _K.SG, _K.MY, _K.EN),
    "zh-hk": (_K.HK, _K.HANT, _K.MO, _K.TW, _K.ZH, _K.HANS, _K.CN, _K.SG, _K.MY, _K.EN),
    "zh-mo": (_K.MO, _K.HANT, _K.HK, _K.TW, _K.ZH, _K.HANS, _K.CN, _K.SG, _K.MY, _K.EN),
})

_REGIONS = frozenset({"cn", "tw", "hk", "sg", "mo", "my"})
_SCRIPTS = {"Hans": "zh-hans", "Hant": "zh-hant"}


def fallback_locale(locale: LocaleCode) -> str | None:
    """Return the fallback table row used for a locale.

    Exact rows win. Otherwise Chinese locales are mapped by region, then by
    script, then to the generic "zh" row, so "zh-Hant-TW" uses "zh-tw" and
    "zh_Hans" uses "zh-hans".

    Args:
        locale: Locale code in any case, with "-" or "_" separators

    Returns:
        Key into FALLBACK_TABLE, or None when the default order applies

    Example:
        >>> fallback_locale("zh_TW")
        'zh-tw'
        >>> fallback_locale("zh-Hant-HK")
        'zh-hk'
        >>> fallback_locale("ja") is None
        True
    """
    normalized = normalize_locale(locale)
    if normalized in FALLBACK_TABLE:
        return normalized

    parts = split_locale(normalized)
    if parts is None:
        return None

    language, territory, script = parts
    if language != "zh":
        return None
    if territory in _REGIONS:
        return f"zh-{territory}"
    return _SCRIPTS.get(script or "", "zh")


def fallback_order(locale: LocaleCode) -> FallbackChain:
    """Return the candidate keys to probe for a locale, most preferred first.

    Args:
        locale: Locale code in any case, with "-" or "_" separators

    Returns:
        Permutation of all CandidateKey members

    Example:
        >>> fallback_order("zh-tw")[:3]
        (<CandidateKey.TW: 'tw'>, <CandidateKey.HANT: 'hant'>, <CandidateKey.HK: 'hk'>)
        >>> fallback_order("fr")[0]
        <CandidateKey.EN: 'en'>
    """
    row = fallback_locale(locale)
    if row is None:
        logger.debug("No fallback chain for locale '%s', using default order", locale)
        return DEFAULT_FALLBACK
    return FALLBACK_TABLE[row]
