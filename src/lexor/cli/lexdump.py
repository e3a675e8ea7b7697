"""
lexdump - LEXOR Token Dump Command-Line Interface
=================================================

This module implements a developer tool that scans a LEXOR source file
and prints its token stream, one token per line. It is useful for
checking how the scanner sees a program before handing it to a parser.

Usage Examples
--------------
Dump tokens:
    $ lexdump hello.lex

JSON output:
    $ lexdump --json hello.lex

Source embedded at line 40 of a larger document:
    $ lexdump -n 40 snippet.lex

Verbose mode (debug logging):
    $ lexdump -v hello.lex
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from lexor import __version__
from lexor.cli.errors import handle_cli_exception
from lexor.config import LexerOptions
from lexor.errors import DiagnosticCollector
from lexor.lexer import Lexer
from lexor.tokens import Token


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Format a token as 'line:column  KIND  text'."""
    position = f"{token.line}:{token.column}"
    if token.diagnostic is not None:
        return f"{position:<8} {token.kind.name:<14} {token.text!r}  ({token.diagnostic.message})"
    return f"{position:<8} {token.kind.name:<14} {token.text!r}"


def token_to_dict(token: Token) -> dict:
    """Convert a token to a JSON-serializable dictionary."""
    data = {
        "kind": token.kind.name,
        "text": token.text,
        "line": token.line,
        "column": token.column,
    }
    if token.diagnostic is not None:
        data["error"] = token.diagnostic.kind.name
        data["message"] = token.diagnostic.message
    return data


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the token stream as a JSON array",
)
@click.option(
    "-n", "--line-number",
    type=click.IntRange(min=1),
    default=None,
    help="Line number of the first source line (default: 1)",
)
@click.option(
    "--comments/--no-comments",
    default=None,
    help="Enable/disable '%%' line comments. Default: disabled, "
         "or LEXOR_LINE_COMMENTS.",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum diagnostics to print (default: 100, or LEXOR_MAX_ERRORS)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="lexdump")
def main(
    input_file: Path,
    as_json: bool,
    line_number: Optional[int],
    comments: Optional[bool],
    max_errors: Optional[int],
    verbose: bool,
) -> None:
    """
    Print the token stream of a LEXOR source file.

    INPUT_FILE is the LEXOR source file to scan.

    Lexical errors are listed in the token stream and reported on
    stderr; the exit status is 1 when any were found.

    \b
    Examples:
        lexdump hello.lex             # One token per line
        lexdump --json hello.lex      # JSON array
        lexdump --comments x.lex      # Skip %% to end of line
    """
    setup_logging(verbose)

    options = LexerOptions.from_env()
    options.filename = str(input_file)
    if line_number is not None:
        options.line_number = line_number
    if comments is not None:
        options.line_comments = comments
    if max_errors is not None:
        options.max_errors = max_errors

    try:
        logger.debug(f"Scanning {input_file} with {options}")
        source = input_file.read_text(encoding="utf-8")

        collector = DiagnosticCollector(max_errors=options.max_errors)
        tokens = collector.collect(Lexer.from_options(source, options).tokenize())

        if as_json:
            click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        else:
            for token in tokens:
                click.echo(format_token(token))

        collector.raise_if_errors()

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
