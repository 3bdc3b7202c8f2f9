"""
JPP Scanner Configuration
=========================

Options for the scanner and the diagnostic wrapper. Configuration can come
from:
- Default values (defined here)
- Environment variables (``LexerOptions.from_env``)
- Command-line flags (applied by ``jpplex`` on top of the environment)
"""

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

# Values accepted as "on" for boolean environment variables
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LexerOptions:
    """
    Scanner configuration options.

    Attributes:
        legacy_dispatch_order: Check the single-quote STRING rule before the
            triple-quote rule, as the first version of the scanner did. With
            this set, an opening \"\"\" is scanned as an empty STRING followed
            by further STRING tokens and MULTILINE_STRING is never produced.
        max_errors: Maximum errors the diagnostic wrapper collects
    """
    legacy_dispatch_order: bool = False
    max_errors: int = 100

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            JPP_LEGACY_DISPATCH: "1", "true", "yes" or "on" enables
                legacy_dispatch_order
            JPP_MAX_ERRORS: Collector limit (integer)
        """
        options = cls()

        if legacy := os.environ.get("JPP_LEGACY_DISPATCH"):
            options.legacy_dispatch_order = legacy.strip().lower() in _TRUE_VALUES

        if max_errors := os.environ.get("JPP_MAX_ERRORS"):
            try:
                options.max_errors = int(max_errors)
            except ValueError:
                logger.warning(f"Ignoring invalid JPP_MAX_ERRORS value {max_errors!r}")

        return options
