"""
LEXOR Keyword Table
===================

Maps reserved spellings to their token kinds. Matching is exact and
case-sensitive: "IF" is a keyword, "If" and "IFX" are identifiers.

The table is consulted only after a complete identifier-shaped lexeme has
been collected, so adding a reserved word never touches the character
classification rules in the lexer.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from lexor.tokens import TokenKind


KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    # Block structure
    "SCRIPT": TokenKind.SCRIPT,
    "AREA": TokenKind.AREA,
    "START": TokenKind.START,
    "END": TokenKind.END,

    # Declarations and types
    "DECLARE": TokenKind.DECLARE,
    "INT": TokenKind.INT_TYPE,
    "CHAR": TokenKind.CHAR_TYPE,
    "BOOL": TokenKind.BOOL_TYPE,
    "FLOAT": TokenKind.FLOAT_TYPE,

    # I/O
    "PRINT": TokenKind.PRINT,
    "SCAN": TokenKind.SCAN,

    # Control flow
    "IF": TokenKind.IF,
    "ELSE": TokenKind.ELSE,
    "FOR": TokenKind.FOR,
    "REPEAT": TokenKind.REPEAT,
    "WHEN": TokenKind.WHEN,

    # Logical
    "AND": TokenKind.AND,
    "OR": TokenKind.OR,
    "NOT": TokenKind.NOT,

    # Boolean literals
    "TRUE": TokenKind.TRUE,
    "FALSE": TokenKind.FALSE,
})


def lookup_keyword(name: str) -> Optional[TokenKind]:
    """Return the keyword kind for an exact spelling, or None."""
    return KEYWORDS.get(name)


def is_reserved(name: str) -> bool:
    return name in KEYWORDS
