"""
LEXOR Scanner - Configuration
=============================

Options for a scan session. Values come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command-line flags (lexdump)
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class LexerOptions:
    """
    Configuration for a scan session.

    Attributes:
        filename: Name reported in token locations and diagnostics
        line_number: Line number of the first source line (default: 1)
        line_comments: Treat '%%' as the start of a comment running to the
                       end of the line (default: False)
        max_errors: Diagnostics kept in a collected report (default: 100)
    """

    filename: str = "<input>"
    line_number: int = 1
    line_comments: bool = False
    max_errors: int = 100

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            LEXOR_LINE_COMMENTS: "1"/"true"/"yes"/"on" or "0"/"false"/"no"/"off"
            LEXOR_MAX_ERRORS: Positive integer

        Invalid values are ignored and the default is kept.
        """
        options = cls()

        if comments := os.environ.get("LEXOR_LINE_COMMENTS"):
            value = comments.strip().lower()
            if value in _TRUE_VALUES:
                options.line_comments = True
            elif value in _FALSE_VALUES:
                options.line_comments = False

        if max_errors := os.environ.get("LEXOR_MAX_ERRORS"):
            try:
                parsed = int(max_errors)
            except ValueError:
                parsed = 0
            if parsed > 0:
                options.max_errors = parsed

        return options
