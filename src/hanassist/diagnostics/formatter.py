"""Rendering of HanAssist diagnostics for logs, terminals and tools.

A public helper: callers holding an exception's .diagnostic can render it
in any OutputFormat. Inside the library it backs Diagnostic.format_error(),
which the legacy API uses to log the failures it swallows.

Python 3.13+.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_SEVERITY_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
}
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """How DiagnosticFormatter lays out a diagnostic."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects as text or JSON.

    RUST prints a headline followed by one "= label: value" line per
    populated field, SIMPLE prints the headline only, JSON emits one object
    per diagnostic. Messages keep their host-language text; JSON output is
    not ASCII-escaped.

    Attributes:
        output_format: Layout to produce
        sanitize: Clip messages and hints to max_content_length
        color: Wrap the severity in ANSI colors (RUST only)
        max_content_length: Clip length used when sanitize is set

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.key_not_found("aricle", "article"))
        'KEY_NOT_FOUND: HanAssist: Key "aricle" not found. Do you mean "article"?'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        match self.output_format:
            case OutputFormat.RUST:
                return self._as_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._as_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _fields(self, diagnostic: Diagnostic) -> list[tuple[str, str, str]]:
        """Populated optional fields as (rust label, json key, value)."""
        candidates = [
            ("parameter", "parameter", diagnostic.parameter),
            ("expected", "expected_type", diagnostic.expected_type),
            ("received", "received_type", diagnostic.received_type),
            ("locale", "locale", diagnostic.locale),
            ("help", "hint", diagnostic.hint and self._clip(diagnostic.hint)),
            ("note", "help_url", diagnostic.help_url),
        ]
        # locale may legitimately be "" (election without a locale)
        return [
            (label, key, value)
            for label, key, value in candidates
            if value or (key == "locale" and value is not None)
        ]

    def _as_rust(self, diagnostic: Diagnostic) -> str:
        """Headline plus indented fields, e.g.

        error[NO_MATCHING_VARIANT]: Failed to select message from "{}" in locale "zh-tw"
          = locale: zh-tw
          = help: Provide at least one non-empty variant
          = note: see https://example.com/
        """
        severity = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_RESET}"
        lines = [f"{severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        for label, _key, value in self._fields(diagnostic):
            prefix = "see " if label == "note" else ""
            lines.append(f"  = {label}: {prefix}{value}")
        return "\n".join(lines)

    def _as_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        data.update((key, value) for _label, key, value in self._fields(diagnostic))
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
