"""Diagnostic rendering for decode failures.

StringLiteralError text and the quickstart output both go through
DiagnosticFormatter. Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Decoded characters land in messages; C0 controls and DEL are shown as
# escapes so one diagnostic always renders as plain printable text.
_CONTROL_ESCAPES: dict[int, str] = {
    **{cp: f"\\x{cp:02x}" for cp in range(0x20)},
    0x7F: "\\x7f",
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
}


def _printable(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style block (default)
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # One JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render a Diagnostic as text.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unterminated_string()))
        UNTERMINATED_STRING: Unterminated string literal
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._as_block(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {_printable(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._as_json(diagnostic)

    @staticmethod
    def _as_block(diagnostic: Diagnostic) -> str:
        """Header line, then location and help lines when present.

        Example output:
            error[INVALID_ESCAPE]: Invalid escape sequence \\q
              --> line 1, column 3
              = help: Valid escapes: ...
        """
        label = "warning" if diagnostic.severity == "warning" else "error"
        lines = [f"{label}[{diagnostic.code.name}]: {_printable(diagnostic.message)}"]
        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> line {span.line}, column {span.column}")
        if diagnostic.hint:
            lines.append(f"  = help: {_printable(diagnostic.hint)}")
        return "\n".join(lines)

    @staticmethod
    def _as_json(diagnostic: Diagnostic) -> str:
        # json.dumps escapes control characters itself
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        span = diagnostic.span
        if span is not None:
            payload.update(
                line=span.line, column=span.column, start=span.start, end=span.end
            )
        if diagnostic.hint:
            payload["hint"] = diagnostic.hint
        return json.dumps(payload, ensure_ascii=False)
