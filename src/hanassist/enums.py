"""Enumerations for HanAssist type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so ``CandidateKey.HANS == "hans"``
and candidate mappings may use either plain strings or members as keys.

Python 3.13+.
"""

from enum import StrEnum


class CandidateKey(StrEnum):
    """Tag identifying one written variant of a message.

    Member order is significant: it is the default fallback order used for
    locales with no dedicated fallback chain.

    StrEnum provides automatic string conversion: str(CandidateKey.HANT) == "hant"
    """

    EN = "en"
    """Universal form, used outside the Chinese-variant family"""

    ZH = "zh"
    """Generic Chinese (zh)"""

    HANS = "hans"
    """Simplified Chinese (zh-hans)"""

    HANT = "hant"
    """Traditional Chinese (zh-hant)"""

    CN = "cn"
    """Mainland China (zh-cn)"""

    TW = "tw"
    """Taiwan (zh-tw)"""

    HK = "hk"
    """Hong Kong (zh-hk)"""

    SG = "sg"
    """Singapore (zh-sg)"""

    MO = "mo"
    """Macau (zh-mo)"""

    MY = "my"
    """Malaysia (zh-my)"""

    @classmethod
    def is_candidate_key(cls, value: object) -> bool:
        """Return True if value names a recognized candidate key."""
        return isinstance(value, str) and value in _CANDIDATE_KEY_VALUES


UNIVERSAL_KEY = CandidateKey.EN

_CANDIDATE_KEY_VALUES: frozenset[str] = frozenset(member.value for member in CandidateKey)


__all__ = [
    "UNIVERSAL_KEY",
    "CandidateKey",
]
