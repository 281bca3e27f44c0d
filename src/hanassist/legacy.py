"""Legacy positional API.

Older call sites pass every variant positionally, in the order

    hans, hant, cn, tw, hk, sg, zh, mo, my, en

leaving out trailing variants or passing None for ones they lack. These
helpers never raise on resolution failures: they return None instead, and a
locale that is not a string is treated like a missing one.
Each call emits a DeprecationWarning pointing to localize() or vary().

Python 3.13+.
"""

from __future__ import annotations

import logging

from hanassist.deprecation import deprecated
from hanassist.diagnostics import HanAssistError
from hanassist.election import elect
from hanassist.host import get_host

__all__ = [
    "uls",
    "uvs",
    "uxs",
]

logger = logging.getLogger(__name__)


def _elect_positional(
    locale: object,
    hans: str | None,
    hant: str | None,
    cn: str | None,
    tw: str | None,
    hk: str | None,
    sg: str | None,
    zh: str | None,
    mo: str | None,
    my: str | None,
    en: str | None,
) -> str | None:
    candidates = {
        "hans": hans, "hant": hant, "cn": cn, "tw": tw, "hk": hk,
        "sg": sg, "zh": zh, "mo": mo, "my": my, "en": en,
    }
    try:
        return elect(candidates, locale if isinstance(locale, str) else "")
    except HanAssistError as e:
        if e.diagnostic is not None:
            logger.debug("Legacy election failed\n%s", e.diagnostic.format_error())
        else:
            logger.debug("Legacy election failed for locale '%s': %s", locale, e)
        return None


@deprecated(alternative="localize()")
def uls(
    hans: str | None = None,
    hant: str | None = None,
    cn: str | None = None,
    tw: str | None = None,
    hk: str | None = None,
    sg: str | None = None,
    zh: str | None = None,
    mo: str | None = None,
    my: str | None = None,
    en: str | None = None,
) -> str | None:
    """Return the variant matching the host language, or None."""
    return _elect_positional(
        get_host().config.language, hans, hant, cn, tw, hk, sg, zh, mo, my, en
    )


@deprecated(alternative="vary()")
def uvs(
    hans: str | None = None,
    hant: str | None = None,
    cn: str | None = None,
    tw: str | None = None,
    hk: str | None = None,
    sg: str | None = None,
    zh: str | None = None,
    mo: str | None = None,
    my: str | None = None,
    en: str | None = None,
) -> str | None:
    """Return the variant matching the host's explicit variant, or None.

    Without an explicit host variant the default fallback order applies.
    """
    return _elect_positional(
        get_host().config.variant, hans, hant, cn, tw, hk, sg, zh, mo, my, en
    )


@deprecated(alternative="localize()")
def uxs(
    locale: str | None,
    hans: str | None = None,
    hant: str | None = None,
    cn: str | None = None,
    tw: str | None = None,
    hk: str | None = None,
    sg: str | None = None,
    zh: str | None = None,
    mo: str | None = None,
    my: str | None = None,
    en: str | None = None,
) -> str | None:
    """Return the variant matching locale, or None."""
    return _elect_positional(locale, hans, hant, cn, tw, hk, sg, zh, mo, my, en)
