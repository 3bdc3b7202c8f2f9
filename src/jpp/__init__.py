"""
JPP - Lexical Scanner for a Small C-like Language
=================================================

This package converts source text into an ordered list of classified tokens
for a small C-like language with C-style comments, documentation comments,
string, character and multi-line string literals.

Main Components
---------------
- **lexer**: the scanner (Lexer, tokenize), Token and TokenType
- **diagnostics**: located error collection over the same token stream
- **config**: scanner options (LexerOptions)
- **errors**: exception hierarchy and ErrorCollector
- **cli**: the ``jpplex`` command-line tool

Quick Start
-----------
    >>> from jpp import tokenize
    >>> [t.value for t in tokenize("a<=b")]
    ['a', '<=', 'b', 'EOF']

Collect diagnostics:
    >>> from jpp import lex_with_diagnostics
    >>> result = lex_with_diagnostics('x = "open', "demo.jpp")
    >>> result.ok
    False

Or use the command-line tool:
    $ jpplex hello.jpp
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from jpp.config import LexerOptions
from jpp.lexer import (
    EOF_TEXT,
    KEYWORDS,
    NEWLINE_TEXT,
    OPERATORS,
    SEPARATORS,
    SPECIAL_SYMBOLS,
    Lexer,
    Token,
    TokenType,
    tokenize,
)
from jpp.diagnostics import DiagnosticLexer, LexResult, lex_with_diagnostics
from jpp.errors import (
    ErrorCollector,
    JppError,
    LexicalError,
    LexicalReportError,
    SourceLocation,
    UnknownCharacterError,
    UnterminatedCommentError,
    UnterminatedLiteralError,
)

__all__ = [
    "__version__",
    # Scanner
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "KEYWORDS",
    "OPERATORS",
    "SEPARATORS",
    "SPECIAL_SYMBOLS",
    "NEWLINE_TEXT",
    "EOF_TEXT",
    # Configuration
    "LexerOptions",
    # Diagnostics
    "DiagnosticLexer",
    "LexResult",
    "lex_with_diagnostics",
    # Exception hierarchy
    "JppError",
    "LexicalError",
    "LexicalReportError",
    "UnknownCharacterError",
    "UnterminatedLiteralError",
    "UnterminatedCommentError",
    "SourceLocation",
    "ErrorCollector",
]
