"""Shared constants for HanAssist.

This module provides centralized configuration constants used across the
election, diagnostics and host layers. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Similarity: Missing-key suggestion tuning
- Fallback strings: Rendering of unknown message ids
- Host configuration: Environment variables and defaults

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Similarity
    "SIMILARITY_THRESHOLD",
    # Fallback strings
    "FALLBACK_MISSING_MESSAGE",
    "HELP_URL",
    # Host configuration
    "ENV_LANGUAGE",
    "ENV_VARIANT",
    "ENV_PREFERRED_VARIANT",
    "DEFAULT_LANGUAGE",
    "DEFAULT_PREFERRED_VARIANT",
]

# ============================================================================
# SIMILARITY
# ============================================================================

# Minimum normalized similarity for a known key to be offered as a
# "did you mean" suggestion. Keys scoring below this are ignored.
SIMILARITY_THRESHOLD: float = 0.6

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Rendering of a message id that is not registered in a MessageRegistry.
# Format string - use .format(id=...)
FALLBACK_MISSING_MESSAGE: str = "{{{id}}}"  # e.g., {key-not-found}

# Documentation link appended to diagnostics.
HELP_URL: str = "https://example.com/"

# ============================================================================
# HOST CONFIGURATION
# ============================================================================

ENV_LANGUAGE: str = "HANASSIST_LANGUAGE"
ENV_VARIANT: str = "HANASSIST_VARIANT"
ENV_PREFERRED_VARIANT: str = "HANASSIST_PREFERRED_VARIANT"

# Used when neither the environment nor the OS reports a locale.
DEFAULT_LANGUAGE: str = "en"

# Script variant preference when the host has no explicit variant.
DEFAULT_PREFERRED_VARIANT: str = "zh"
