"""Hypothesis strategies for HanAssist property-based testing.

Strategies are organized by domain:

- candidates: candidate keys, Candidates mappings, message tables, locales

Usage:
    from tests.strategies import candidate_mappings, locale_codes

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - candidate_mappings, locale_codes, message_tables
"""

from .candidates import (
    CANDIDATE_KEY_VALUES,
    TABLE_LOCALES,
    candidate_keys,
    candidate_mappings,
    locale_codes,
    message_keys,
    message_tables,
)

__all__ = [
    "CANDIDATE_KEY_VALUES",
    "TABLE_LOCALES",
    "candidate_keys",
    "candidate_mappings",
    "locale_codes",
    "message_keys",
    "message_tables",
]
