# =============================================================================
# test_diagnostics.py - Diagnostic Scanning Tests
# =============================================================================
# Tests for the diagnostic-collecting wrapper around the scanner.
#
# Test coverage includes:
#   - Token lists identical to the plain scanner
#   - Token offsets and line/column locations
#   - Errors for UNKNOWN characters, unterminated literals and comments
#   - Warnings for malformed numbers and character literals
#   - Error limit and strict mode
# =============================================================================

import pytest

from jpp.config import LexerOptions
from jpp.diagnostics import DiagnosticLexer, lex_with_diagnostics
from jpp.errors import (
    LexicalReportError,
    SourceLocation,
    UnknownCharacterError,
    UnterminatedCommentError,
    UnterminatedLiteralError,
)
from jpp.lexer import TokenType, tokenize
from jpp.sample import SAMPLE_PROGRAM


def diagnose(source: str, **options):
    """Helper to scan with diagnostics under the name 'demo.jpp'."""
    return lex_with_diagnostics(source, "demo.jpp", LexerOptions(**options))


# =============================================================================
# Token Stream Tests
# =============================================================================

class TestTokenStream:
    """The wrapper never changes the token list."""

    @pytest.mark.parametrize("source", [
        SAMPLE_PROGRAM,
        'x = "open',
        "'ab' % /* x",
        "1.2.3 '' /** doc",
    ])
    def test_same_tokens_as_plain_lexer(self, source):
        assert diagnose(source).tokens == tokenize(source)

    def test_same_tokens_legacy_order(self):
        source = 'a = """abc""";'
        options = LexerOptions(legacy_dispatch_order=True)
        result = lex_with_diagnostics(source, options=options)
        assert result.tokens == tokenize(source, options)
        assert result.ok

    def test_clean_source(self):
        result = diagnose(SAMPLE_PROGRAM)
        assert result.ok
        assert result.errors == []
        assert result.warnings == []


# =============================================================================
# Location Tests
# =============================================================================

class TestLocations:
    """Test offsets and source locations."""

    def test_offsets(self):
        result = diagnose("ab cd")
        assert result.offsets == [0, 3, 5]

    def test_offsets_parallel_to_tokens(self):
        result = diagnose(SAMPLE_PROGRAM)
        assert len(result.offsets) == len(result.tokens)
        assert len(result.locations) == len(result.tokens)

    def test_locations(self):
        result = diagnose("a\n  b")
        located = [(t.value, loc) for t, loc in result.located()]
        assert located == [
            ("a", SourceLocation("demo.jpp", 1, 1)),
            ("\\n", SourceLocation("demo.jpp", 1, 2)),
            ("b", SourceLocation("demo.jpp", 2, 3)),
            ("EOF", SourceLocation("demo.jpp", 2, 4)),
        ]

    def test_eof_after_unterminated_string(self):
        """EOF is placed at the end of input even after an overshoot."""
        result = diagnose('"ab')
        assert result.offsets[-1] == 3

    def test_source_line(self):
        lexer = DiagnosticLexer("first\nsecond line\nthird")
        assert lexer.source_line(8) == "second line"
        assert lexer.source_line(0) == "first"


# =============================================================================
# Error and Warning Tests
# =============================================================================

class TestAnomalies:
    """Test which anomalies are reported, and how."""

    def test_unknown_character(self):
        result = diagnose("a\n  %")
        assert len(result.errors) == 1
        error = result.errors[0]
        assert isinstance(error, UnknownCharacterError)
        assert error.char == "%"
        assert error.location == SourceLocation("demo.jpp", 2, 3)
        assert str(error).splitlines() == [
            "demo.jpp:2:3: error: unknown character '%' (0x25)",
            "      %",
            "      ^",
        ]

    @pytest.mark.parametrize("source, literal", [
        ('"abc', "string"),
        ("'", "character"),
        ('"""abc', "multi-line string"),
    ])
    def test_unterminated_literals(self, source, literal):
        result = diagnose(source)
        assert len(result.errors) == 1
        error = result.errors[0]
        assert isinstance(error, UnterminatedLiteralError)
        assert error.literal == literal
        assert error.location == SourceLocation("demo.jpp", 1, 1)

    def test_unterminated_string_location(self):
        result = diagnose('x = 1;\ny = "abc')
        assert result.errors[0].location == SourceLocation("demo.jpp", 2, 5)

    def test_unterminated_block_comment(self):
        result = diagnose("x /* open")
        error = result.errors[0]
        assert isinstance(error, UnterminatedCommentError)
        assert not error.documentation
        assert error.location == SourceLocation("demo.jpp", 1, 3)

    def test_unterminated_javadoc(self):
        result = diagnose("/** open")
        error = result.errors[0]
        assert isinstance(error, UnterminatedCommentError)
        assert error.documentation
        assert result.tokens[0].type == TokenType.JAVADOC

    @pytest.mark.parametrize("source", ["1.2.3", "7."])
    def test_malformed_number_warning(self, source):
        result = diagnose(source)
        assert result.ok
        assert result.warnings == [
            f"demo.jpp:1:1: warning: malformed numeric literal '{source}'"
        ]

    def test_valid_float_no_warning(self):
        assert diagnose("1.5 .5").warnings == []

    def test_empty_character_warning(self):
        result = diagnose("''")
        assert result.ok
        assert result.warnings == ["demo.jpp:1:1: warning: empty character literal"]

    def test_long_character_warning(self):
        result = diagnose("'ab' ")
        assert "character literal holds more than one character" in result.warnings[0]


# =============================================================================
# Error Limit and Strict Mode Tests
# =============================================================================

class TestLimits:
    """Test max_errors and strict mode."""

    def test_max_errors(self):
        result = diagnose("%%%%", max_errors=2)
        assert result.collector.error_count() == 2
        unknown = [t for t in result.tokens if t.type == TokenType.UNKNOWN]
        assert len(unknown) == 4

    def test_strict_raises(self):
        with pytest.raises(LexicalReportError) as exc_info:
            lex_with_diagnostics("a % b", "demo.jpp", strict=True)
        assert "demo.jpp:1:3: error: unknown character '%'" in str(exc_info.value)
        assert "1 error, 0 warnings" in str(exc_info.value)

    def test_strict_clean_source(self):
        result = lex_with_diagnostics("a = 1;", strict=True)
        assert result.ok

    def test_repeat_tokenize_resets_collector(self):
        lexer = DiagnosticLexer("%")
        lexer.tokenize()
        lexer.tokenize()
        assert lexer.collector.error_count() == 1
        assert lexer.offsets == [0, 1]
