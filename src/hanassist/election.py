"""Message election.

Picks one concrete string out of a candidate mapping for a locale, singly
(elect) or across a whole message table (batch_elect). It turns a table like

    {
        "apple": {"hans": "苹果", "hant": "蘋果", "en": "apple"},
        "banana": {"hans": "香蕉", "hant": "香蕉", "en": "banana"},
        "minute": "分",
    }

into this, for locale "zh-cn":

    {"apple": "苹果", "banana": "香蕉", "minute": "分"}

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from hanassist.candidates import are_candidates, get_type_name
from hanassist.diagnostics import (
    ErrorTemplate,
    InvalidCandidateShapeError,
    NoMatchingVariantError,
)
from hanassist.fallback import fallback_order

if TYPE_CHECKING:
    from hanassist.enums import CandidateKey
    from hanassist.messages import MessageRegistry
    from hanassist.types import LocaleCode, MessageTable

__all__ = [
    "batch_elect",
    "elect",
    "serialize_candidates",
]

logger = logging.getLogger(__name__)

_DEFINITION_EXPECTED = "str | Candidates"


def serialize_candidates(candidates: object) -> str:
    """Best-effort JSON rendering of candidates for error messages.

    Values json cannot encode degrade to a "<type name>" description
    rather than failing the caller.
    """
    try:
        return json.dumps(candidates, ensure_ascii=False)
    except (TypeError, ValueError):
        return f"<{get_type_name(candidates)}>"


def elect[T](
    candidates: Mapping[CandidateKey | str, T | None],
    locale: LocaleCode,
    *,
    registry: MessageRegistry | None = None,
) -> T:
    """Select the entry of candidates matching locale.

    Walks the locale's fallback chain and returns the first present value.
    None values count as absent.

    Args:
        candidates: Mapping from candidate keys to values
        locale: Locale code
        registry: Registry rendering error messages, defaults to the host's

    Returns:
        The elected value

    Raises:
        NoMatchingVariantError: If no key in the fallback chain is present

    Example:
        >>> elect({"hans": "苹果", "hant": "蘋果"}, "zh-tw")
        '蘋果'
        >>> elect({"en": "apple"}, "zh-tw")
        'apple'
    """
    for key in fallback_order(locale):
        winner = candidates.get(key)
        if winner is not None:
            return winner

    serialized = serialize_candidates(dict(candidates))
    raise NoMatchingVariantError(
        ErrorTemplate.no_matching_variant(serialized, locale, registry=registry),
        serialized_candidates=serialized,
        locale=locale,
        registry=registry,
    )


def _display_name(name: str) -> str:
    return f"messages.{name}" if name.isidentifier() else f"messages[{name!r}]"


def batch_elect(
    messages: MessageTable,
    locale: LocaleCode,
    *,
    registry: MessageRegistry | None = None,
) -> dict[str, str]:
    """Elect every entry of a message table.

    Plain strings are shared by all locales and copied verbatim; Candidates
    mappings are elected. The result has exactly the keys of messages, in
    the same order.

    Args:
        messages: Raw message table
        locale: Locale code
        registry: Registry rendering error messages, defaults to the host's

    Returns:
        Flat mapping from message name to elected string

    Raises:
        InvalidCandidateShapeError: If an entry is neither str nor Candidates
        NoMatchingVariantError: If a Candidates entry has no usable variant
    """
    elected: dict[str, str] = {}
    for name, definition in messages.items():
        if isinstance(definition, str):
            elected[name] = definition
        elif are_candidates(definition):
            elected[name] = elect(definition, locale, registry=registry)
        else:
            display = _display_name(str(name))
            actual = get_type_name(definition)
            raise InvalidCandidateShapeError(
                ErrorTemplate.invalid_candidate_shape(
                    display, _DEFINITION_EXPECTED, actual, registry=registry
                ),
                parameter=display,
                expected=_DEFINITION_EXPECTED,
                actual=actual,
                registry=registry,
            )

    logger.debug("Elected %d messages for locale '%s'", len(elected), locale)
    return elected
