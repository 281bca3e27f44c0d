"""Diagnostic system for HanAssist errors and warnings.

Every error and warning carries a Diagnostic: a numeric code, the message
rendered in the host language, and the raw values behind it (parameter
names, types, locale) so callers can inspect failures without parsing text.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    HanAssistError,
    InvalidCandidateShapeError,
    InvalidParameterError,
    NoMatchingVariantError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "HanAssistError",
    "InvalidCandidateShapeError",
    "InvalidParameterError",
    "NoMatchingVariantError",
    "OutputFormat",
]
