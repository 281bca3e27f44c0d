"""Type aliases for the election domain.

Provides semantic type aliases used throughout the package and by user code
when annotating message tables.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from hanassist.enums import CandidateKey

__all__ = [
    "Candidates",
    "LocaleCode",
    "MessageDefinition",
    "MessageKey",
    "MessageTable",
    "ResolvedMessages",
]

type MessageKey = str
"""Name of an entry in a message table (e.g., 'article', 'SearchHint')."""

type LocaleCode = str
"""Locale code (e.g., 'zh-cn', 'zh_TW', 'zh-Hant-HK', 'en')."""

type Candidates = Mapping[CandidateKey | str, str]
"""One message spelled per variant, e.g. {'hans': '条目', 'hant': '條目'}."""

type MessageDefinition = str | Candidates
"""A message shared by all locales, or one spelled per variant."""

type MessageTable = Mapping[MessageKey, MessageDefinition]
"""Raw, unresolved messages keyed by name."""

type ResolvedMessages = Mapping[MessageKey, str]
"""Messages after election: one string per name."""
