"""Locale utilities for fallback-table lookups.

Fallback rows are keyed by lowercase, hyphen-separated locale codes. These
helpers bring user-supplied codes into that form and split them into
language, territory and script for the region and script fallbacks.

Python 3.13+.
"""

from __future__ import annotations

import functools
import locale
import os

from babel.core import parse_locale

from hanassist.constants import DEFAULT_LANGUAGE

__all__ = [
    "LocaleParts",
    "get_system_locale",
    "normalize_locale",
    "split_locale",
]

type LocaleParts = tuple[str, str | None, str | None]
"""(language, territory, script) with language and territory lowercased."""

_LOCALE_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")
_PSEUDO_LOCALES = frozenset({"C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to the canonical fallback-table form.

    Both BCP-47 (``zh-TW``) and POSIX (``zh_TW``) spellings are accepted.
    The result is lowercase and hyphen-separated, so "zh_TW", "ZH-tw" and
    " zh-tw " all address the same fallback table row.

    Args:
        locale_code: Locale code in BCP-47 or POSIX format

    Returns:
        Lowercase, hyphen-separated locale code

    Example:
        >>> normalize_locale("zh_TW")
        'zh-tw'
        >>> normalize_locale("zh-Hant-HK")
        'zh-hant-hk'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("_", "-").lower()


def _drop_extensions(locale_code: str) -> str:
    subtags = locale_code.split("-")
    for index, subtag in enumerate(subtags[1:], start=1):
        if len(subtag) == 1:
            return "-".join(subtags[:index])
    return locale_code


@functools.lru_cache(maxsize=128)
def split_locale(locale_code: str) -> LocaleParts | None:
    """Split a locale code into language, territory and script.

    Parsing is syntactic only (``babel.core.parse_locale``); the locale need
    not have CLDR data. Extension and private-use sequences (from the
    first single-letter subtag on, e.g. "-u-ca-chinese" or "-x-private")
    are dropped before parsing. Results are cached since the same handful
    of user locales is looked up repeatedly.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        (language, territory, script) with language and territory lowercased
        and script title-cased, or None if the code is not a well-formed
        locale identifier.

    Example:
        >>> split_locale("zh-Hant-TW")
        ('zh', 'tw', 'Hant')
        >>> split_locale("zh_hans")
        ('zh', None, 'Hans')
        >>> split_locale("zh-cn-u-ca-chinese")
        ('zh', 'cn', None)
        >>> split_locale("!!") is None
        True
    """
    try:
        language, territory, script, _variant = parse_locale(
            _drop_extensions(normalize_locale(locale_code)), sep="-"
        )[:4]
    except ValueError:
        return None
    return language.lower(), territory.lower() if territory else None, script


def _strip_encoding(value: str) -> str:
    return value.partition(".")[0].partition("@")[0]


def get_system_locale() -> str:
    """Return the user's locale, normalized, for the default host language.

    The interpreter's locale.getlocale() wins; otherwise LC_ALL, LC_MESSAGES
    and LANG are consulted in that order. Encoding suffixes such as ".UTF-8"
    are removed first, so "C.UTF-8" is skipped like the bare "C" and "POSIX"
    pseudo-locales.

    Returns:
        Normalized locale code, or DEFAULT_LANGUAGE when none is configured

    Example:
        >>> # LANG=zh_TW.UTF-8
        >>> get_system_locale()
        'zh-tw'
    """
    try:
        detected: str | None = locale.getlocale()[0]
    except (ValueError, AttributeError):
        detected = None

    candidates = [detected, *(os.environ.get(name) for name in _LOCALE_VARIABLES)]
    for value in candidates:
        if not value:
            continue
        stripped = _strip_encoding(value).strip()
        if stripped and stripped.upper() not in _PSEUDO_LOCALES:
            return normalize_locale(stripped)
    return DEFAULT_LANGUAGE
