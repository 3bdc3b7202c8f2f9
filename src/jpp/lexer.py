"""
JPP Lexer (Scanner)
===================

This module implements a hand-written scanner for a small C-like language.
It converts source text into a list of classified tokens in a single pass
over the input.

Token Categories
----------------
- Keywords: if, else, while, for, true, false
- Identifiers: letter-led runs of letters and digits
- Numbers: digit runs (NUMBER) and digit/dot runs (FLOAT)
- Strings: "double quoted", no escape processing
- Characters: 'c', a single character with no escape processing
- Multi-line strings: \"\"\"triple quoted\"\"\"
- Documentation comments: /** ... */ (kept as JAVADOC tokens)
- Operators: + - * / = < > ++ -- == <= >= !=
- Separators: ; , ( ) { } [ ]
- Special symbols: @ # $

Line comments (//) and block comments (/* */) produce no tokens. Each
newline produces a NEWLINE token whose value is the two-character escape
form ``\\n``.

Permissive Scanning
-------------------
The scanner never raises on malformed input. Unterminated literals and
comments consume to end of input, malformed numbers such as ``1.2.3`` pass
through as one FLOAT, and characters outside every table become UNKNOWN
tokens. Use :mod:`jpp.diagnostics` to collect located errors for the same
token stream.

Example Usage
-------------
>>> from jpp.lexer import tokenize
>>> for token in tokenize('int a = 10;'):
...     print(token)
Token(IDENTIFIER, 'int')
Token(IDENTIFIER, 'a')
Token(OPERATOR, '=')
Token(NUMBER, '10')
Token(SEPARATOR, ';')
Token(EOF, 'EOF')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import logging

from jpp.config import LexerOptions

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types produced by the scanner.

    WHITESPACE, COMMENT, BOOLEAN and TEMPLATE are reserved: the scan loop
    never produces them, but consumers may switch over the full set.
    """

    KEYWORD = auto()            # if, else, while, for, true, false
    IDENTIFIER = auto()         # Variable/function names
    NUMBER = auto()             # Integer literals
    FLOAT = auto()              # Literals containing '.'
    OPERATOR = auto()           # + - * / = < > ++ -- == <= >= !=
    WHITESPACE = auto()         # Reserved
    SEPARATOR = auto()          # ; , ( ) { } [ ]
    STRING = auto()             # "..."
    CHARACTER = auto()          # '.'
    COMMENT = auto()            # Reserved
    BOOLEAN = auto()            # Reserved
    NEWLINE = auto()            # \n
    SPECIAL = auto()            # @ # $
    JAVADOC = auto()            # /** ... */
    TEMPLATE = auto()           # Reserved (backtick templates)
    MULTILINE_STRING = auto()   # """..."""
    EOF = auto()                # End of input
    UNKNOWN = auto()            # Any character outside the tables


# =============================================================================
# Classification Tables
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({"if", "else", "while", "for", "true", "false"})

OPERATORS: frozenset[str] = frozenset({
    "+", "-", "*", "/", "=", "<", ">",
    "++", "--", "==", "<=", ">=", "!=",
})

SEPARATORS: frozenset[str] = frozenset({";", ",", "(", ")", "{", "}", "[", "]"})

SPECIAL_SYMBOLS: frozenset[str] = frozenset({"@", "#", "$"})

# Value of the NEWLINE token: backslash followed by 'n'
NEWLINE_TEXT = "\\n"

EOF_TEXT = "EOF"

TRIPLE_QUOTE = '"""'


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        type: The TokenType classification
        value: The lexeme text. Literal tokens hold the body without the
            surrounding quotes; JAVADOC tokens keep their delimiters.
    """
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def kind(self) -> TokenType:
        """Alias for ``type``."""
        return self.type

    @property
    def text(self) -> str:
        """Alias for ``value``."""
        return self.value


# =============================================================================
# Lexer Implementation
# =============================================================================

def _is_digit(char: Optional[str]) -> bool:
    return char is not None and char.isdecimal()


class Lexer:
    """
    Tokenizes JPP source code.

    The scanner keeps a cursor into the source and the character under it.
    The current character is None (the sentinel) once the cursor passes the
    end of the input, so a literal NUL in the source is an ordinary
    character.

    Usage:
        lexer = Lexer(source_text)
        tokens = lexer.tokenize()

    Subclasses can observe the scan through two hooks: ``_emit`` is called
    for every token with the offset where its lexeme starts, and ``_flag``
    is called when a literal or comment is malformed. The base class ignores
    anomalies.

    Attributes:
        source: The source code being tokenized
        options: Scanner options
    """

    def __init__(self, source: str, options: Optional[LexerOptions] = None):
        self.source = source
        self.options = options or LexerOptions()
        self._pos = 0
        self._current: Optional[str] = source[0] if source else None
        self._tokens: list[Token] = []

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    @property
    def position(self) -> int:
        """Current cursor offset into the source."""
        return self._pos

    @property
    def current(self) -> Optional[str]:
        """Character under the cursor, or None past the end."""
        return self._current

    def advance(self) -> None:
        """Move the cursor forward one character."""
        self._pos += 1
        if self._pos < len(self.source):
            self._current = self.source[self._pos]
        else:
            self._current = None

    def peek(self) -> Optional[str]:
        """Return the character after the cursor without advancing."""
        pos = self._pos + 1
        if pos < len(self.source):
            return self.source[pos]
        return None

    def peek_next(self) -> Optional[str]:
        """Return the character two positions after the cursor."""
        pos = self._pos + 2
        if pos < len(self.source):
            return self.source[pos]
        return None

    def _at_triple_quote(self) -> bool:
        return self._current == '"' and self.peek() == '"' and self.peek_next() == '"'

    # =========================================================================
    # Hooks
    # =========================================================================

    def _emit(self, token_type: TokenType, value: str, start: int) -> None:
        """Append a token whose lexeme starts at offset ``start``."""
        self._tokens.append(Token(token_type, value))

    def _flag(self, token_type: TokenType, start: int, problem: str) -> None:
        """
        Report a malformed construct starting at ``start``.

        ``problem`` is one of "unterminated", "empty" or "too_long". The
        core scanner degrades silently, so this does nothing.
        """

    # =========================================================================
    # Main Loop
    # =========================================================================

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            The tokens in source order, always ending with one EOF token
        """
        self._pos = 0
        self._current = self.source[0] if self.source else None
        self._tokens = []

        # Under the legacy order the STRING rule always sees '"' first, so
        # triple-quoted strings are never recognized.
        triple_quotes = not self.options.legacy_dispatch_order

        while self._current is not None:
            start = self._pos
            char = self._current

            if char != "\n" and char.isspace():
                self._skip_whitespace()
            elif char == "\n":
                self._emit(TokenType.NEWLINE, NEWLINE_TEXT, start)
                self.advance()
            elif char.isalpha():
                value = self._collect_identifier()
                token_type = TokenType.KEYWORD if value in KEYWORDS else TokenType.IDENTIFIER
                self._emit(token_type, value, start)
            elif char.isdecimal() or (char == "." and _is_digit(self.peek())):
                value = self._collect_number()
                token_type = TokenType.FLOAT if "." in value else TokenType.NUMBER
                self._emit(token_type, value, start)
            elif triple_quotes and self._at_triple_quote():
                value = self._collect_multiline_string(start)
                self._emit(TokenType.MULTILINE_STRING, value, start)
            elif char == '"':
                value = self._collect_string(start)
                self._emit(TokenType.STRING, value, start)
            elif char == "'":
                value = self._collect_character(start)
                self._emit(TokenType.CHARACTER, value, start)
            elif char == "/" and self.peek() in ("/", "*"):
                self._skip_comment(start)
            elif char in SEPARATORS:
                self._emit(TokenType.SEPARATOR, char, start)
                self.advance()
            elif char in SPECIAL_SYMBOLS:
                self._emit(TokenType.SPECIAL, char, start)
                self.advance()
            else:
                self._scan_operator(start)

        self._emit(TokenType.EOF, EOF_TEXT, min(self._pos, len(self.source)))
        logger.debug(
            f"Tokenized {len(self.source)} characters into {len(self._tokens)} tokens"
        )
        return self._tokens

    # =========================================================================
    # Scanning Rules
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip whitespace, stopping at newlines."""
        while (
            self._current is not None
            and self._current != "\n"
            and self._current.isspace()
        ):
            self.advance()

    def _collect_identifier(self) -> str:
        chars = []
        while self._current is not None and (
            self._current.isalpha() or self._current.isdecimal()
        ):
            chars.append(self._current)
            self.advance()
        return "".join(chars)

    def _collect_number(self) -> str:
        """
        Collect a run of digits and dots.

        The run is not validated: ``1.2.3`` and ``7.`` are accepted whole.
        """
        chars = []
        while self._current is not None and (
            self._current.isdecimal() or self._current == "."
        ):
            chars.append(self._current)
            self.advance()
        return "".join(chars)

    def _collect_string(self, start: int) -> str:
        """Collect a double-quoted string body up to the next '"'."""
        self.advance()  # opening "
        chars = []
        while self._current is not None and self._current != '"':
            chars.append(self._current)
            self.advance()
        if self._current is None:
            self._flag(TokenType.STRING, start, "unterminated")
        self.advance()  # closing "
        return "".join(chars)

    def _collect_character(self, start: int) -> str:
        """
        Collect a character literal.

        At most one character is taken; the following character is then
        skipped as the closing quote whether or not it is one.
        """
        self.advance()  # opening '
        value = ""
        if self._current is not None and self._current != "'":
            value = self._current
            self.advance()

        if self._current is None:
            self._flag(TokenType.CHARACTER, start, "unterminated")
        elif self._current != "'":
            self._flag(TokenType.CHARACTER, start, "too_long")
        elif not value:
            self._flag(TokenType.CHARACTER, start, "empty")

        self.advance()  # closing '
        return value

    def _collect_multiline_string(self, start: int) -> str:
        """Collect a triple-quoted string body up to the next \"\"\"."""
        for _ in TRIPLE_QUOTE:
            self.advance()

        chars = []
        while self._current is not None:
            if self._at_triple_quote():
                for _ in TRIPLE_QUOTE:
                    self.advance()
                return "".join(chars)
            chars.append(self._current)
            self.advance()

        self._flag(TokenType.MULTILINE_STRING, start, "unterminated")
        return "".join(chars)

    def _skip_comment(self, start: int) -> None:
        """
        Skip a line or block comment, or emit a documentation comment.

        A block comment opening with ``/**`` is a documentation comment and
        becomes a JAVADOC token holding its full text. ``/**/`` is an empty
        block comment.
        """
        if self.peek() == "/":
            while self._current is not None and self._current != "\n":
                self.advance()
            return

        self.advance()  # '/'
        self.advance()  # '*'

        if self._current == "*" and self.peek() != "/":
            self.advance()
            chars = ["/**"]
            while self._current is not None:
                if self._current == "*" and self.peek() == "/":
                    chars.append("*/")
                    self.advance()
                    self.advance()
                    self._emit(TokenType.JAVADOC, "".join(chars), start)
                    return
                chars.append(self._current)
                self.advance()
            self._flag(TokenType.JAVADOC, start, "unterminated")
            self._emit(TokenType.JAVADOC, "".join(chars), start)
            return

        while self._current is not None:
            if self._current == "*" and self.peek() == "/":
                self.advance()
                self.advance()
                return
            self.advance()
        self._flag(TokenType.COMMENT, start, "unterminated")

    def _scan_operator(self, start: int) -> None:
        """Emit a two-character operator, a one-character operator or UNKNOWN."""
        char = self._current
        next_char = self.peek()

        if next_char is not None and char + next_char in OPERATORS:
            self.advance()
            self._emit(TokenType.OPERATOR, char + next_char, start)
        elif char in OPERATORS:
            self._emit(TokenType.OPERATOR, char, start)
        else:
            self._emit(TokenType.UNKNOWN, char, start)
        self.advance()


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(source: str, options: Optional[LexerOptions] = None) -> list[Token]:
    """
    Tokenize source text.

    Args:
        source: The text to scan
        options: Scanner options (defaults to LexerOptions())

    Returns:
        List of tokens ending with an EOF token
    """
    return Lexer(source, options).tokenize()
