"""
jpplex - JPP Scanner Command-Line Interface
===========================================

Scans a source file and prints its tokens, one per line.

Usage Examples
--------------
Scan the built-in demo program:
    $ jpplex

Scan a file:
    $ jpplex hello.jpp

Read from stdin:
    $ cat hello.jpp | jpplex -

JSON output with timings:
    $ jpplex --json --timing hello.jpp

Fail on lexical errors:
    $ jpplex --strict hello.jpp
"""

import json
import logging
import time
from typing import Optional, TextIO

import click

from jpp import __version__
from jpp.cli.errors import handle_cli_exception
from jpp.config import LexerOptions
from jpp.diagnostics import lex_with_diagnostics
from jpp.lexer import Token, tokenize
from jpp.sample import SAMPLE_PROGRAM

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_tokens(tokens: list[Token], as_json: bool) -> str:
    """Render tokens as text lines or as a JSON array."""
    if as_json:
        return json.dumps(
            [{"type": token.type.name, "value": token.value} for token in tokens],
            indent=2,
        )
    return "\n".join(repr(token) for token in tokens)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.File("r", encoding="utf-8"),
    required=False,
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print tokens as a JSON array",
)
@click.option(
    "--timing",
    is_flag=True,
    help="Print scan, print and total times in milliseconds",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Report lexical errors and exit with status 1 if any are found",
)
@click.option(
    "--legacy-dispatch",
    is_flag=True,
    help='Scan """ as STRING tokens, as the first scanner version did',
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="jpplex")
def main(
    input_file: Optional[TextIO],
    as_json: bool,
    timing: bool,
    strict: bool,
    legacy_dispatch: bool,
    verbose: bool,
) -> None:
    """
    Scan JPP source code and print its tokens.

    INPUT_FILE is the source file to scan; use - for stdin. Without it the
    built-in demo program is scanned.

    \b
    Environment:
        JPP_LEGACY_DISPATCH   same as --legacy-dispatch
        JPP_MAX_ERRORS        error limit for --strict (default: 100)
    """
    setup_logging(verbose)

    options = LexerOptions.from_env()
    if legacy_dispatch:
        options.legacy_dispatch_order = True

    try:
        if input_file is None:
            filename = "<sample>"
            source = SAMPLE_PROGRAM
        else:
            filename = getattr(input_file, "name", "<stdin>")
            source = input_file.read()

        logger.debug(f"Scanning {filename} ({len(source)} characters)")

        scan_start = time.perf_counter()
        if strict:
            result = lex_with_diagnostics(source, filename, options)
            tokens = result.tokens
        else:
            result = None
            tokens = tokenize(source, options)
        scan_end = time.perf_counter()

        click.echo(format_tokens(tokens, as_json))
        print_end = time.perf_counter()

        if timing:
            click.echo(f"scan:  {(scan_end - scan_start) * 1000:.3f} ms", err=True)
            click.echo(f"print: {(print_end - scan_end) * 1000:.3f} ms", err=True)
            click.echo(f"total: {(print_end - scan_start) * 1000:.3f} ms", err=True)

        if result is not None:
            # The error report already lists the warnings
            result.collector.raise_if_errors()
            for warning in result.warnings:
                click.echo(warning, err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
