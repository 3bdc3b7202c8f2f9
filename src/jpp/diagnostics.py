"""
Diagnostic Scanning
===================

A diagnostic-collecting wrapper around the core scanner. DiagnosticLexer
runs the unchanged scan loop of jpp.lexer.Lexer and listens to its hooks:
every token is recorded with its start offset, and anomalies are turned into
located LexicalError objects in an ErrorCollector.

The token list is always identical to the one the plain Lexer produces.

Reported anomalies
------------------
Errors:
- UNKNOWN tokens (UnknownCharacterError)
- strings, characters and multi-line strings reaching end of input
  (UnterminatedLiteralError)
- block and documentation comments reaching end of input
  (UnterminatedCommentError)

Warnings:
- FLOAT literals with more than one '.' or a trailing '.'
- empty character literals ('')
- character literals holding more than one character

Example:
    >>> from jpp.diagnostics import lex_with_diagnostics
    >>> result = lex_with_diagnostics("a % b", "demo.jpp")
    >>> result.collector.error_count()
    1
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional
import logging

from jpp.config import LexerOptions
from jpp.errors import (
    ErrorCollector,
    LexicalError,
    SourceLocation,
    UnknownCharacterError,
    UnterminatedCommentError,
    UnterminatedLiteralError,
)
from jpp.lexer import Lexer, Token, TokenType

logger = logging.getLogger(__name__)

# Literal names used in messages, keyed by the token type being scanned
_LITERAL_NAMES = {
    TokenType.STRING: "string",
    TokenType.CHARACTER: "character",
    TokenType.MULTILINE_STRING: "multi-line string",
}


@dataclass
class LexResult:
    """
    Tokens plus the diagnostics found while scanning them.

    Attributes:
        tokens: The token list, as the plain Lexer returns it
        offsets: Start offset of each token's lexeme (parallel to tokens)
        collector: Collected errors and warnings
        locations: Source location of each token (parallel to tokens)
    """
    tokens: list[Token]
    offsets: list[int]
    collector: ErrorCollector
    locations: list[SourceLocation] = field(default_factory=list)

    @property
    def errors(self) -> list[LexicalError]:
        return self.collector.errors

    @property
    def warnings(self) -> list[str]:
        return self.collector.warnings

    @property
    def ok(self) -> bool:
        """True when no errors were collected."""
        return not self.collector.has_errors()

    def located(self) -> Iterator[tuple[Token, SourceLocation]]:
        """Yield (token, location) pairs."""
        return zip(self.tokens, self.locations)


class DiagnosticLexer(Lexer):
    """
    Lexer that records token offsets and collects anomalies.

    Usage:
        lexer = DiagnosticLexer(source, "demo.jpp")
        tokens = lexer.tokenize()
        if lexer.collector.has_errors():
            print(lexer.collector.report())
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[LexerOptions] = None,
    ):
        super().__init__(source, options)
        self.filename = filename
        self.collector = ErrorCollector(max_errors=self.options.max_errors)
        self.offsets: list[int] = []

    def tokenize(self) -> list[Token]:
        self.collector.clear()
        self.offsets = []
        tokens = super().tokenize()
        logger.debug(
            f"{self.filename}: {self.collector.error_count()} errors, "
            f"{self.collector.warning_count()} warnings"
        )
        return tokens

    # =========================================================================
    # Location Helpers
    # =========================================================================

    def location(self, offset: int) -> SourceLocation:
        """Convert a source offset into a 1-indexed line and column."""
        offset = min(offset, len(self.source))
        line = self.source.count("\n", 0, offset) + 1
        line_start = self.source.rfind("\n", 0, offset) + 1
        return SourceLocation(self.filename, line, offset - line_start + 1)

    def source_line(self, offset: int) -> str:
        """Return the text of the line holding ``offset``."""
        offset = min(offset, len(self.source))
        line_start = self.source.rfind("\n", 0, offset) + 1
        line_end = self.source.find("\n", offset)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end]

    # =========================================================================
    # Hooks
    # =========================================================================

    def _emit(self, token_type: TokenType, value: str, start: int) -> None:
        super()._emit(token_type, value, start)
        self.offsets.append(start)

        if token_type is TokenType.UNKNOWN:
            self._add_error(UnknownCharacterError(
                value,
                self.location(start),
                self.source_line(start),
            ))
        elif token_type is TokenType.FLOAT and (value.count(".") > 1 or value.endswith(".")):
            self.collector.add_warning(
                f"malformed numeric literal '{value}'", self.location(start)
            )

    def _flag(self, token_type: TokenType, start: int, problem: str) -> None:
        location = self.location(start)
        line = self.source_line(start)

        if problem == "unterminated":
            if token_type in _LITERAL_NAMES:
                self._add_error(UnterminatedLiteralError(
                    _LITERAL_NAMES[token_type], location, line
                ))
            else:
                self._add_error(UnterminatedCommentError(
                    token_type is TokenType.JAVADOC, location, line
                ))
        elif problem == "empty":
            self.collector.add_warning("empty character literal", location)
        elif problem == "too_long":
            self.collector.add_warning(
                "character literal holds more than one character", location
            )

    def _add_error(self, error: LexicalError) -> None:
        if self.collector.should_stop():
            return
        self.collector.add(error)


# =============================================================================
# Convenience Function
# =============================================================================

def lex_with_diagnostics(
    source: str,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
    strict: bool = False,
) -> LexResult:
    """
    Tokenize source text and collect diagnostics.

    Args:
        source: The text to scan
        filename: Name used in error locations
        options: Scanner options
        strict: Raise LexicalReportError when any error was collected

    Returns:
        LexResult holding the tokens and the collector

    Raises:
        LexicalReportError: In strict mode, if errors were collected
    """
    lexer = DiagnosticLexer(source, filename, options)
    tokens = lexer.tokenize()
    result = LexResult(
        tokens=tokens,
        offsets=lexer.offsets,
        collector=lexer.collector,
        locations=[lexer.location(offset) for offset in lexer.offsets],
    )
    if strict:
        result.collector.raise_if_errors()
    return result
