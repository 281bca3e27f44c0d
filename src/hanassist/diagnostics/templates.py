"""Diagnostic builders for every HanAssist error and warning.

Message text is looked up in a MessageRegistry (the process-wide host's
unless one is passed), so diagnostics read in the host language. Raise sites
pass the returned Diagnostic to the exception instead of formatting text.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hanassist.constants import HELP_URL

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from hanassist.messages import MessageRegistry

__all__ = ["ErrorTemplate"]


def _msg(message_id: str, *args: str, registry: MessageRegistry | None = None) -> str:
    if registry is None:
        from hanassist.host import get_host  # noqa: PLC0415 - circular

        registry = get_host().messages
    return registry.format(message_id, *args)


class ErrorTemplate:
    """One static builder per DiagnosticCode."""

    @staticmethod
    def _parameter_message(
        name: str,
        expected: str | None,
        actual: str | None,
        registry: MessageRegistry | None,
    ) -> str:
        detail = (
            _msg("invalid-parameter-detail", expected, actual or "", registry=registry)
            if expected is not None
            else ""
        )
        return _msg("invalid-parameter", name, detail, registry=registry)

    @staticmethod
    def invalid_parameter(
        name: str,
        expected: str | None = None,
        actual: str | None = None,
        *,
        registry: MessageRegistry | None = None,
    ) -> Diagnostic:
        """Parameter has the wrong type or shape.

        Args:
            name: Display name of the parameter
            expected: Expected type description (omitted from message if None)
            actual: Actual type description
            registry: Registry to render with, defaults to the process-wide host's

        Returns:
            Diagnostic for INVALID_PARAMETER
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_PARAMETER,
            message=ErrorTemplate._parameter_message(name, expected, actual, registry),
            help_url=HELP_URL,
            parameter=name,
            expected_type=expected,
            received_type=actual,
        )

    @staticmethod
    def invalid_candidate_shape(
        name: str, expected: str, actual: str, *, registry: MessageRegistry | None = None
    ) -> Diagnostic:
        """Message table entry is neither a string nor Candidates.

        Args:
            name: Display name of the entry (e.g. "messages.apple")
            expected: Expected shape description
            actual: Actual type description
            registry: Registry to render with, defaults to the process-wide host's

        Returns:
            Diagnostic for INVALID_CANDIDATE_SHAPE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_CANDIDATE_SHAPE,
            message=ErrorTemplate._parameter_message(name, expected, actual, registry),
            hint="Use a string, or a mapping from candidate keys to strings",
            help_url=HELP_URL,
            parameter=name,
            expected_type=expected,
            received_type=actual,
        )

    @staticmethod
    def no_matching_variant(
        serialized_candidates: str, locale: str, *, registry: MessageRegistry | None = None
    ) -> Diagnostic:
        """No fallback key for the locale is present in the candidates.

        Args:
            serialized_candidates: Best-effort rendering of the candidates
            locale: Locale the election was attempted in
            registry: Registry to render with, defaults to the process-wide host's

        Returns:
            Diagnostic for NO_MATCHING_VARIANT
        """
        return Diagnostic(
            code=DiagnosticCode.NO_MATCHING_VARIANT,
            message=_msg("no-message-found", serialized_candidates, locale, registry=registry),
            hint="Provide at least one non-empty variant",
            help_url=HELP_URL,
            locale=locale,
        )

    @staticmethod
    def key_not_found(
        key: str,
        suggestion: str | None = None,
        *,
        registry: MessageRegistry | None = None,
    ) -> Diagnostic:
        """Message key missing from a resolved message set.

        Args:
            key: Key that was looked up
            suggestion: Closest known key, if any cleared the similarity threshold
            registry: Registry to render with, defaults to the process-wide host's

        Returns:
            Diagnostic for KEY_NOT_FOUND (warning severity)
        """
        hint = (
            _msg("similar-key-suggestion", suggestion, registry=registry) if suggestion else ""
        )
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=_msg("key-not-found", key, hint, registry=registry).rstrip(),
            hint=hint or None,
            severity="warning",
        )

    @staticmethod
    def deprecated_use(alternative: str) -> Diagnostic:
        """Legacy API called.

        Args:
            alternative: Name of the replacement API

        Returns:
            Diagnostic for DEPRECATED_USE (warning severity)
        """
        return Diagnostic(
            code=DiagnosticCode.DEPRECATED_USE,
            message=_msg("deprecated-use", alternative),
            severity="warning",
        )
