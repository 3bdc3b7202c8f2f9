"""
JPP Error Hierarchy
===================

This module defines the exceptions used by the JPP package. All of them
inherit from JppError, allowing callers to catch every package error with a
single except clause.

The core scanner never raises: it degrades malformed input to best-effort
tokens. These classes describe the anomalies that the diagnostic wrapper
(jpp.diagnostics) finds in the same token stream.

Exception Hierarchy
-------------------
JppError (base)
└── LexicalError - an anomaly at a source location
    ├── UnknownCharacterError - character outside every token table
    ├── UnterminatedLiteralError - string, character or multi-line string
    │                              reaching end of input
    ├── UnterminatedCommentError - block or documentation comment
    │                              reaching end of input
    └── LexicalReportError - aggregate report of collected errors

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class JppError(Exception):
    """Base exception for all JPP errors."""
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source text.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(JppError):
    """
    Base class for scanning anomalies.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The source text of the line holding the error
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            demo.jpp:3:9: error: unknown character '%' (0x25)
                int b = a % 2;
                          ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnknownCharacterError(LexicalError):
    """A character that matches no token rule (scanned as UNKNOWN)."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unknown character '{char}' (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )


class UnterminatedLiteralError(LexicalError):
    """
    A string, character or multi-line string literal with no closing quote.

    The scanner keeps everything up to end of input as the literal body.
    """

    CLOSERS = {
        "string": '"',
        "character": "'",
        "multi-line string": '"""',
    }

    def __init__(
        self,
        literal: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        closer = self.CLOSERS.get(literal)
        hint = f"add closing {closer} to complete the {literal}" if closer else None
        super().__init__(
            f"unterminated {literal} literal",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnterminatedCommentError(LexicalError):
    """A block or documentation comment with no closing */."""

    def __init__(
        self,
        documentation: bool = False,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.documentation = documentation
        kind = "documentation comment" if documentation else "block comment"
        super().__init__(
            f"unterminated {kind}",
            location=location,
            hint="add closing */ to terminate the comment",
            source_line=source_line,
        )


class LexicalReportError(LexicalError):
    """
    Aggregate error raised by ErrorCollector.raise_if_errors().

    The message is already a formatted report and is passed through as-is.
    """

    def _format_message(self) -> str:
        return self.message


# =============================================================================
# Error Collection
# =============================================================================

class ErrorCollector:
    """
    Collects errors and warnings for batch reporting.

    Example:
        collector = ErrorCollector(max_errors=100)
        collector.add(UnknownCharacterError("%", location))
        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        self.errors: List[LexicalError] = []
        self.warnings: List[str] = []
        self.max_errors = max_errors

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def add_warning(self, message: str, location: Optional[SourceLocation] = None) -> None:
        """Add a warning message."""
        if location:
            self.warnings.append(f"{location}: warning: {message}")
        else:
            self.warnings.append(f"warning: {message}")

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        return len(self.errors)

    def warning_count(self) -> int:
        return len(self.warnings)

    def report(self) -> str:
        """Format all errors and warnings for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        for warning in self.warnings:
            lines.append(warning)

        error_word = "error" if len(self.errors) == 1 else "errors"
        warning_word = "warning" if len(self.warnings) == 1 else "warnings"
        lines.append(
            f"\n{len(self.errors)} {error_word}, {len(self.warnings)} {warning_word}"
        )

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors and warnings."""
        self.errors.clear()
        self.warnings.clear()

    def raise_if_errors(self) -> None:
        """Raise a LexicalReportError if any errors were collected."""
        if self.has_errors():
            raise LexicalReportError(self.report())
