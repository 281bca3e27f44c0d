"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by HanAssist errors
and warnings.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parameter errors (malformed input from calling code)
        2000-2999: Resolution errors (no variant satisfies the fallback chain)
        3000-3999: Lookup warnings (missing message keys)
        4000-4999: Deprecation warnings (legacy positional API)
    """

    # Parameter errors (1000-1999)
    INVALID_PARAMETER = 1001
    INVALID_CANDIDATE_SHAPE = 1002

    # Resolution errors (2000-2999)
    NO_MATCHING_VARIANT = 2001

    # Lookup warnings (3000-3999)
    KEY_NOT_FOUND = 3001

    # Deprecation warnings (4000-4999)
    DEPRECATED_USE = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools. The message
    is already rendered in the host language; the remaining fields keep the
    raw values so tools do not have to parse the message.

    Attributes:
        code: Unique error code
        message: Human-readable description, rendered in the host language
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        parameter: Parameter name that caused the error (parameter errors)
        expected_type: Expected type description (parameter errors)
        received_type: Actual type description (parameter errors)
        locale: Locale the resolution was attempted in (resolution errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    parameter: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    locale: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[INVALID_PARAMETER]: Invalid parameter "locale", Expected str but got int
              = parameter: locale
              = expected: str
              = received: int
              = note: see https://example.com/

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
