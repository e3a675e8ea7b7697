"""
LEXOR Token Model
=================

Token kinds and the immutable Token value produced by the scanner.

Token Categories
----------------
- Block keywords: SCRIPT, AREA, START, END
- Declarations and types: DECLARE, INT, CHAR, BOOL, FLOAT
- I/O: PRINT, SCAN
- Control flow: IF, ELSE, FOR, REPEAT, WHEN
- Logical: AND, OR, NOT
- Literals: numbers, "strings", 'c' characters, TRUE, FALSE
- Operators: + - * / % > < >= <= == <> = &
- Punctuation: $ ( ) [ ] : ,
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from lexor.errors import Diagnostic, SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the LEXOR language.

    The set is closed: a parser matches on it exhaustively. Keywords are
    distinguished from identifiers to simplify parsing.
    """

    # === Keywords - Block Structure ===
    SCRIPT = auto()         # SCRIPT
    AREA = auto()           # AREA
    START = auto()          # START
    END = auto()            # END

    # === Keywords - Declarations and Types ===
    DECLARE = auto()        # DECLARE
    INT_TYPE = auto()       # INT
    CHAR_TYPE = auto()      # CHAR
    BOOL_TYPE = auto()      # BOOL
    FLOAT_TYPE = auto()     # FLOAT

    # === Keywords - I/O ===
    PRINT = auto()          # PRINT
    SCAN = auto()           # SCAN

    # === Keywords - Control Flow ===
    IF = auto()             # IF
    ELSE = auto()           # ELSE
    FOR = auto()            # FOR
    REPEAT = auto()         # REPEAT
    WHEN = auto()           # WHEN

    # === Keywords - Logical ===
    AND = auto()            # AND
    OR = auto()             # OR
    NOT = auto()            # NOT

    # === Literals ===
    NUMBER = auto()         # 123, 45.67
    STRING = auto()         # "hello"
    CHAR_LITERAL = auto()   # 'a'
    TRUE = auto()           # TRUE
    FALSE = auto()          # FALSE

    # === Identifiers ===
    IDENTIFIER = auto()     # variable names

    # === Arithmetic Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    MULTIPLY = auto()       # *
    DIVIDE = auto()         # /
    MODULO = auto()         # %

    # === Comparison Operators ===
    GREATER = auto()        # >
    LESS = auto()           # <
    GREATER_EQ = auto()     # >=
    LESS_EQ = auto()        # <=
    EQUAL = auto()          # ==
    NOT_EQUAL = auto()      # <>

    # === Assignment and Concatenation ===
    ASSIGN = auto()         # =
    CONCAT = auto()         # &

    # === Punctuation ===
    STATEMENT_END = auto()  # $
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]
    COLON = auto()          # :
    COMMA = auto()          # ,

    # === Sentinels ===
    END_OF_INPUT = auto()
    ERROR = auto()


# =============================================================================
# Token Categories
# =============================================================================

KEYWORD_KINDS = frozenset({
    TokenKind.SCRIPT, TokenKind.AREA, TokenKind.START, TokenKind.END,
    TokenKind.DECLARE, TokenKind.INT_TYPE, TokenKind.CHAR_TYPE,
    TokenKind.BOOL_TYPE, TokenKind.FLOAT_TYPE,
    TokenKind.PRINT, TokenKind.SCAN,
    TokenKind.IF, TokenKind.ELSE, TokenKind.FOR, TokenKind.REPEAT, TokenKind.WHEN,
    TokenKind.AND, TokenKind.OR, TokenKind.NOT,
})

TYPE_KINDS = frozenset({
    TokenKind.INT_TYPE, TokenKind.CHAR_TYPE, TokenKind.BOOL_TYPE, TokenKind.FLOAT_TYPE,
})

LITERAL_KINDS = frozenset({
    TokenKind.NUMBER, TokenKind.STRING, TokenKind.CHAR_LITERAL,
    TokenKind.TRUE, TokenKind.FALSE,
})

OPERATOR_KINDS = frozenset({
    TokenKind.PLUS, TokenKind.MINUS, TokenKind.MULTIPLY, TokenKind.DIVIDE,
    TokenKind.MODULO, TokenKind.GREATER, TokenKind.LESS, TokenKind.GREATER_EQ,
    TokenKind.LESS_EQ, TokenKind.EQUAL, TokenKind.NOT_EQUAL, TokenKind.ASSIGN,
    TokenKind.CONCAT, TokenKind.STATEMENT_END, TokenKind.LPAREN, TokenKind.RPAREN,
    TokenKind.LBRACKET, TokenKind.RBRACKET, TokenKind.COLON, TokenKind.COMMA,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from LEXOR source text.

    Tokens are plain immutable values: they keep no reference to the lexer
    that produced them and can be shared freely.

    Attributes:
        kind: The TokenKind classification
        text: The lexeme (canonical symbol for operators, decoded content
              for string and character literals, empty for END_OF_INPUT)
        line: Line number of the first character (1-indexed)
        column: Column number of the first character (1-indexed)
        filename: Name of the source buffer
        diagnostic: Error details for ERROR tokens, None otherwise
    """
    kind: TokenKind
    text: str
    line: int
    column: int
    filename: str = "<input>"
    diagnostic: Optional[Diagnostic] = None

    def __repr__(self) -> str:
        if self.kind is TokenKind.END_OF_INPUT:
            return f"Token({self.kind.name}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        return self.kind in KEYWORD_KINDS

    def is_type_keyword(self) -> bool:
        """Return True if this token names a variable type (INT, CHAR, BOOL, FLOAT)."""
        return self.kind in TYPE_KINDS

    def is_literal(self) -> bool:
        return self.kind in LITERAL_KINDS

    def is_operator(self) -> bool:
        """Return True for operators and punctuation, including '$'."""
        return self.kind in OPERATOR_KINDS

    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR
