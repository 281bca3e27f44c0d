"""One-off election helpers.

localize() and vary() accept relaxed candidate shapes and elect a string per
call, without building a LocalizedMessageSet. Assuming the host language and
variant are both "zh-cn":

    >>> localize({"hans": "一天一苹果，医生远离我。", "hant": "一天一蘋果，醫生遠離我。"})
    '一天一苹果，医生远离我。'
    >>> localize(["一天一苹果，医生远离我。", "一天一蘋果，醫生遠離我。"])  # shorthand
    '一天一苹果，医生远离我。'
    >>> localize(["苹果", "蘋果"], locale="zh-tw")
    '蘋果'
    >>> vary({"hans": "苹果", "hant": "蘋果"})
    '苹果'

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hanassist.candidates import SingleCandidate, parse_candidates
from hanassist.diagnostics import ErrorTemplate, InvalidParameterError
from hanassist.election import elect
from hanassist.host import get_host

if TYPE_CHECKING:
    from hanassist.types import LocaleCode

__all__ = [
    "localize",
    "vary",
]


def _elect_relaxed(candidates: object, locale: LocaleCode) -> str:
    match parse_candidates(candidates):
        case SingleCandidate(text=text):
            return text
        case shape:
            return elect(shape.as_candidates(), locale)


def localize(candidates: object, *, locale: LocaleCode | None = None) -> str:
    """Return the candidate matching a locale, by default the host language.

    Args:
        candidates: A string, [str], [hans, hant], or a Candidates mapping
        locale: Locale code, defaults to the host language

    Returns:
        The elected string

    Raises:
        InvalidParameterError: If candidates has none of the accepted shapes
            or locale is not a string
        NoMatchingVariantError: If no variant covers the locale
    """
    if locale is None:
        locale = get_host().config.language
    elif not isinstance(locale, str):
        raise InvalidParameterError(
            ErrorTemplate.invalid_parameter("locale", "str", type(locale).__name__),
            parameter="locale",
            expected="str",
            actual=type(locale).__name__,
        )
    return _elect_relaxed(candidates, locale)


def vary(candidates: object) -> str:
    """Return the candidate matching the host's script variant.

    Uses the host's explicit variant, or the user's preferred variant when
    none is set.

    Args:
        candidates: A string, [str], [hans, hant], or a Candidates mapping

    Returns:
        The elected string

    Raises:
        InvalidParameterError: If candidates has none of the accepted shapes
        NoMatchingVariantError: If no variant covers the locale
    """
    return _elect_relaxed(candidates, get_host().config.effective_variant)
