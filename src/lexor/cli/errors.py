"""
CLI Error Handling
==================

Consistent error reporting and exit codes for the command-line tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    LEXICAL_ERROR = 1    # Source contains lexical errors
    INVALID_ARGS = 2     # Invalid arguments or unreadable files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print the full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from lexor.errors import LexicalError, LexorError

    if isinstance(error, LexicalError):
        # Diagnostics already carry the "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.LEXICAL_ERROR)

    elif isinstance(error, LexorError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.LEXICAL_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, UnicodeDecodeError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
