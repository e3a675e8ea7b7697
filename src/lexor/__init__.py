"""
LEXOR - Lexical Scanner for the LEXOR Scripting Language
========================================================

This package converts LEXOR source text into a stream of classified
tokens for a downstream parser.

LEXOR is a small BASIC-like language with SCRIPT/AREA/START/END blocks,
typed DECLARE statements and '$' as an explicit statement terminator:

    SCRIPT AREA
    START SCRIPT
        DECLARE INT x=4, y=5$
        PRINT: x & " " & y$
    END SCRIPT

Main Components
---------------
- **lexer**: the scanner (Lexer, tokenize, tokenize_strict)
- **tokens**: TokenKind and the immutable Token value
- **keywords**: the reserved word table
- **cursor**: the forward-only source cursor
- **errors**: diagnostics and the exception hierarchy
- **config**: LexerOptions

Quick Start
-----------
    >>> from lexor import tokenize
    >>> [t.kind.name for t in tokenize("x = 1$")]
    ['IDENTIFIER', 'ASSIGN', 'NUMBER', 'STATEMENT_END', 'END_OF_INPUT']

Or dump the tokens of a file from the command line:
    $ lexdump program.lex
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lexor.config import LexerOptions
from lexor.cursor import SourceCursor
from lexor.errors import (
    Diagnostic,
    DiagnosticCollector,
    LexicalError,
    LexicalErrorKind,
    LexorError,
    SourceLocation,
)
from lexor.keywords import KEYWORDS, lookup_keyword
from lexor.lexer import Lexer, tokenize, tokenize_strict
from lexor.tokens import (
    KEYWORD_KINDS,
    LITERAL_KINDS,
    OPERATOR_KINDS,
    TYPE_KINDS,
    Token,
    TokenKind,
)

__all__ = [
    "__version__",
    # Scanner
    "Lexer",
    "tokenize",
    "tokenize_strict",
    "LexerOptions",
    "SourceCursor",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "lookup_keyword",
    "KEYWORD_KINDS",
    "LITERAL_KINDS",
    "OPERATOR_KINDS",
    "TYPE_KINDS",
    # Errors
    "LexorError",
    "LexicalError",
    "LexicalErrorKind",
    "Diagnostic",
    "DiagnosticCollector",
    "SourceLocation",
]
