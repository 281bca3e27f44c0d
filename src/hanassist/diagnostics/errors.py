"""HanAssist exception hierarchy with structured diagnostics.

Two kinds of failure exist:
- Programmer errors (InvalidParameterError, InvalidCandidateShapeError) for
  malformed input. They subclass TypeError and always propagate.
- Resolution failures (NoMatchingVariantError) when a candidate mapping does
  not cover the requested locale. They subclass LookupError and are
  suppressed by the tolerant lookup paths (message-set getters, legacy API).

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from hanassist.messages import MessageRegistry

__all__ = [
    "HanAssistError",
    "InvalidCandidateShapeError",
    "InvalidParameterError",
    "NoMatchingVariantError",
]


def _render(diagnostic: Diagnostic, registry: MessageRegistry | None) -> str:
    """Wrap a diagnostic message in the generic error message."""
    if registry is None:
        from hanassist.host import get_host  # noqa: PLC0415 - circular

        registry = get_host().messages
    return registry.format("generic-error", diagnostic.message)


class HanAssistError(Exception):
    """Base exception for all HanAssist errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(
        self, message: str | Diagnostic, *, registry: MessageRegistry | None = None
    ) -> None:
        """Initialize HanAssistError.

        Args:
            message: Error message string OR Diagnostic object
            registry: Registry rendering the generic error wrapper, defaults
                to the process-wide host's
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(_render(message, registry))
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidParameterError(HanAssistError, TypeError):
    """A parameter has the wrong type or shape.

    Raised synchronously for defects in the calling code: wrong types,
    empty required mappings, unrecognized candidate keys, wrong-arity
    shorthand sequences.

    Attributes:
        parameter: Display name of the offending parameter
        expected: Expected type description (empty if not reported)
        actual: Actual type description (empty if not reported)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        parameter: str = "",
        expected: str = "",
        actual: str = "",
        registry: MessageRegistry | None = None,
    ) -> None:
        """Initialize InvalidParameterError.

        Args:
            message: Error message string OR Diagnostic object
            parameter: Display name of the offending parameter
            expected: Expected type description
            actual: Actual type description
            registry: Registry rendering the message, defaults to the host's
        """
        super().__init__(message, registry=registry)
        self.parameter = parameter
        self.expected = expected
        self.actual = actual


class InvalidCandidateShapeError(InvalidParameterError):
    """An entry of a message table is neither a string nor a Candidates mapping."""


class NoMatchingVariantError(HanAssistError, LookupError):
    """No key in the locale's fallback chain is present in a candidate mapping.

    Attributes:
        serialized_candidates: Best-effort JSON rendering of the candidates
        locale: Locale the election was attempted in
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        serialized_candidates: str = "",
        locale: str = "",
        registry: MessageRegistry | None = None,
    ) -> None:
        """Initialize NoMatchingVariantError.

        Args:
            message: Error message string OR Diagnostic object
            serialized_candidates: Best-effort JSON rendering of the candidates
            locale: Locale the election was attempted in
            registry: Registry rendering the message, defaults to the host's
        """
        super().__init__(message, registry=registry)
        self.serialized_candidates = serialized_candidates
        self.locale = locale
