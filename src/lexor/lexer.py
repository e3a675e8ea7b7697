"""
LEXOR Lexer (Scanner)
=====================

This module implements the lexical scanner for the LEXOR scripting
language. It converts source text into a stream of tokens for a parser.

Token Recognition
-----------------
| Starts with        | Rule                                           |
|--------------------|------------------------------------------------|
| space, tab, CR, LF | skipped (line breaks are not statement ends)   |
| %%                 | comment to end of line, when enabled           |
| $                  | STATEMENT_END                                  |
| letter or _        | keyword (exact spelling) or IDENTIFIER         |
| digit              | NUMBER, integral or with one decimal point     |
| "                  | STRING, escapes \\" \\\\ \\n                        |
| '                  | CHAR_LITERAL, exactly one character or escape  |
| anything else      | operator/punctuation by maximal munch          |

Error Recovery
--------------
Lexical errors never raise. Each one is emitted as an ERROR token whose
text is the offending span and whose diagnostic explains the problem;
scanning then resumes after that span. Every error consumes at least one
character, so a scan always terminates with a single END_OF_INPUT token.

Number Policy
-------------
A decimal point belongs to a number only when a digit follows it, so
"45." scans as NUMBER '45' followed by an ERROR for the stray '.'.
A second decimal point ("1.2.3") turns the whole digit/point run into
one malformed-number ERROR.

Example Usage
-------------
>>> from lexor.lexer import Lexer
>>> lexer = Lexer('DECLARE INT x=5$', "demo.lex")
>>> for token in lexer.tokenize():
...     print(token)
Token(DECLARE, 'DECLARE', 1:1)
Token(INT_TYPE, 'INT', 1:9)
Token(IDENTIFIER, 'x', 1:13)
Token(ASSIGN, '=', 1:14)
Token(NUMBER, '5', 1:15)
Token(STATEMENT_END, '$', 1:16)
Token(END_OF_INPUT, 1:17)
"""

import logging
import string
from types import MappingProxyType
from typing import Iterator, Optional

from lexor.config import LexerOptions
from lexor.cursor import END_OF_INPUT, SourceCursor
from lexor.errors import (
    Diagnostic,
    DiagnosticCollector,
    LexicalErrorKind,
    SourceLocation,
)
from lexor.keywords import lookup_keyword
from lexor.tokens import Token, TokenKind


logger = logging.getLogger(__name__)


class Lexer:
    """
    Tokenizes LEXOR source code.

    A Lexer is a single scan session: it owns one cursor over one source
    string and produces each token once. To scan the same text again,
    create a new Lexer.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source (for token locations and diagnostics)
        line_comments: Whether '%%' starts a comment (off by default)
    """

    IDENT_START = frozenset(string.ascii_letters + "_")
    IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
    DIGITS = frozenset(string.digits)
    WHITESPACE = frozenset(" \t\r\n")

    STRING_ESCAPES = MappingProxyType({
        '"': '"',
        "\\": "\\",
        "n": "\n",
    })

    CHAR_ESCAPES = MappingProxyType({
        "'": "'",
        '"': '"',
        "\\": "\\",
        "n": "\n",
    })

    # Checked before SINGLE_CHAR_TOKENS (maximal munch)
    TWO_CHAR_TOKENS = MappingProxyType({
        ">=": TokenKind.GREATER_EQ,
        "<=": TokenKind.LESS_EQ,
        "==": TokenKind.EQUAL,
        "<>": TokenKind.NOT_EQUAL,
    })

    SINGLE_CHAR_TOKENS = MappingProxyType({
        "$": TokenKind.STATEMENT_END,
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.MULTIPLY,
        "/": TokenKind.DIVIDE,
        "%": TokenKind.MODULO,
        ">": TokenKind.GREATER,
        "<": TokenKind.LESS,
        "=": TokenKind.ASSIGN,
        "&": TokenKind.CONCAT,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "[": TokenKind.LBRACKET,
        "]": TokenKind.RBRACKET,
        ":": TokenKind.COLON,
        ",": TokenKind.COMMA,
    })

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        line_number: int = 1,
        line_comments: bool = False,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The LEXOR source code to tokenize
            filename: Name of the source (for diagnostics)
            line_number: Starting line number, for text embedded in a larger file
            line_comments: Treat '%%' as a comment running to end of line.
                When False (the default) every '%' is MODULO.
        """
        self.source = source
        self.filename = filename
        self.line_comments = line_comments

        self._cursor = SourceCursor(source, line_number)
        self._finished = False

        self._token_count = 0
        self._error_count = 0

    @classmethod
    def from_options(cls, source: str, options: LexerOptions) -> "Lexer":
        """Create a lexer configured from a LexerOptions instance."""
        return cls(
            source,
            filename=options.filename,
            line_number=options.line_number,
            line_comments=options.line_comments,
        )

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        The final token is always END_OF_INPUT. Once it has been produced
        the session is exhausted and further calls yield nothing.

        Yields:
            Token objects, in source order
        """
        while not self._finished:
            yield self.next_token()

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def finished(self) -> bool:
        """True once END_OF_INPUT has been produced."""
        return self._finished

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        After END_OF_INPUT has been returned, every further call returns
        another END_OF_INPUT at the same position.
        """
        if self._finished:
            return self._make_token(
                TokenKind.END_OF_INPUT, "", self._cursor.line, self._cursor.column
            )

        self._skip_whitespace_and_comments()

        start_line = self._cursor.line
        start_column = self._cursor.column

        if self._cursor.at_end():
            self._finished = True
            logger.debug(
                f"{self.filename}: scanned {self._token_count} tokens, "
                f"{self._error_count} errors"
            )
            return self._make_token(TokenKind.END_OF_INPUT, "", start_line, start_column)

        self._token_count += 1
        return self._scan_token(start_line, start_column)

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        text: str,
        start_line: int,
        start_column: int,
        diagnostic: Optional[Diagnostic] = None,
    ) -> Token:
        return Token(
            kind=kind,
            text=text,
            line=start_line,
            column=start_column,
            filename=self.filename,
            diagnostic=diagnostic,
        )

    def _error_token(
        self,
        kind: LexicalErrorKind,
        start: int,
        start_line: int,
        start_column: int,
        message: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> Token:
        """
        Create an ERROR token covering the source consumed since start.

        Error spans never cross a line feed, so the cursor is still on
        the line where the span began.
        """
        text = self._cursor.slice_from(start)
        location = SourceLocation(self.filename, start_line, start_column)
        diagnostic = Diagnostic(
            kind=kind,
            message=message or kind.value,
            location=location,
            hint=hint,
            source_line=self._cursor.current_line_text(),
        )
        self._error_count += 1
        logger.debug(f"{location}: recovered from {kind.value} {text!r}")
        return self._make_token(TokenKind.ERROR, text, start_line, start_column, diagnostic)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        cursor = self._cursor
        while not cursor.at_end():
            char = cursor.peek()

            if char in self.WHITESPACE:
                cursor.advance()
                continue

            if self.line_comments and char == "%" and cursor.peek_next() == "%":
                # The line feed is left for the whitespace branch
                while not cursor.at_end() and cursor.peek() != "\n":
                    cursor.advance()
                continue

            break

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self, start_line: int, start_column: int) -> Token:
        char = self._cursor.peek()

        if char in self.IDENT_START:
            return self._scan_identifier(start_line, start_column)

        if char in self.DIGITS:
            return self._scan_number(start_line, start_column)

        if char == '"':
            return self._scan_string(start_line, start_column)

        if char == "'":
            return self._scan_char(start_line, start_column)

        return self._scan_operator(start_line, start_column)

    def _scan_identifier(self, start_line: int, start_column: int) -> Token:
        """
        Scan an identifier or keyword.

        The whole identifier is collected before the keyword table is
        consulted, so "IFX" is an identifier and never IF followed by X.
        """
        start = self._cursor.offset
        while self._cursor.peek() in self.IDENT_CHARS:
            self._cursor.advance()

        name = self._cursor.slice_from(start)
        kind = lookup_keyword(name) or TokenKind.IDENTIFIER
        return self._make_token(kind, name, start_line, start_column)

    def _scan_number(self, start_line: int, start_column: int) -> Token:
        """
        Scan a numeric literal: digits, optionally '.' and more digits.
        """
        cursor = self._cursor
        start = cursor.offset
        self._consume_digits()

        if cursor.peek() == "." and cursor.peek_next() in self.DIGITS:
            cursor.advance()  # consume .
            self._consume_digits()

            if cursor.peek() == ".":
                # Resynchronize at the first character that is neither digit nor point
                while cursor.peek() == "." or cursor.peek() in self.DIGITS:
                    cursor.advance()
                text = cursor.slice_from(start)
                return self._error_token(
                    LexicalErrorKind.MALFORMED_NUMBER,
                    start,
                    start_line,
                    start_column,
                    message=f"malformed number '{text}'",
                    hint="a number can contain at most one decimal point",
                )

        return self._make_token(
            TokenKind.NUMBER, cursor.slice_from(start), start_line, start_column
        )

    def _consume_digits(self) -> None:
        while self._cursor.peek() in self.DIGITS:
            self._cursor.advance()

    def _scan_string(self, start_line: int, start_column: int) -> Token:
        """
        Scan a double-quoted string literal.

        The token text is the decoded content. Unknown escapes keep their
        backslash. A line feed or end of input before the closing quote
        ends the literal as an error, leaving the line feed unconsumed.
        """
        cursor = self._cursor
        start = cursor.offset
        cursor.advance()  # consume opening "

        chars = []
        while True:
            char = cursor.peek()

            if char == END_OF_INPUT or char == "\n":
                return self._error_token(
                    LexicalErrorKind.UNTERMINATED_STRING,
                    start,
                    start_line,
                    start_column,
                    hint="add a closing '\"' before the end of the line",
                )

            if char == '"':
                cursor.advance()  # consume closing "
                return self._make_token(
                    TokenKind.STRING, "".join(chars), start_line, start_column
                )

            if char == "\\" and cursor.peek_next() in self.STRING_ESCAPES:
                cursor.advance()  # consume backslash
                chars.append(self.STRING_ESCAPES[cursor.advance()])
                continue

            chars.append(cursor.advance())

    def _scan_char(self, start_line: int, start_column: int) -> Token:
        """
        Scan a single-quoted character literal.

        Exactly one character or escape sequence must appear between the
        quotes. Errors:
        - '' (empty): malformed, the two quotes are consumed
        - 'ab': malformed, consumed through the closing quote
        - 'a (no closing quote on the line): unterminated, consumed up to
          the line feed or end of input
        """
        cursor = self._cursor
        start = cursor.offset
        cursor.advance()  # consume opening '

        char = cursor.peek()
        if char == END_OF_INPUT or char == "\n":
            return self._unterminated_char(start, start_line, start_column)

        if char == "'":
            cursor.advance()
            return self._error_token(
                LexicalErrorKind.MALFORMED_CHAR_LITERAL,
                start,
                start_line,
                start_column,
                message="empty character literal",
                hint="a character literal must contain exactly one character",
            )

        if char == "\\" and cursor.peek_next() in self.CHAR_ESCAPES:
            cursor.advance()  # consume backslash
            value = self.CHAR_ESCAPES[cursor.advance()]
        else:
            value = cursor.advance()

        if cursor.match("'"):
            return self._make_token(TokenKind.CHAR_LITERAL, value, start_line, start_column)

        # Too long or unterminated: look for a closing quote on this line
        while cursor.peek() not in ("'", "\n", END_OF_INPUT):
            if cursor.peek() == "\\" and cursor.peek_next() not in ("\n", END_OF_INPUT):
                cursor.advance()
            cursor.advance()

        if cursor.match("'"):
            return self._error_token(
                LexicalErrorKind.MALFORMED_CHAR_LITERAL,
                start,
                start_line,
                start_column,
                message="character literal contains more than one character",
                hint='use a string literal ("...") for more than one character',
            )

        return self._unterminated_char(start, start_line, start_column)

    def _unterminated_char(self, start: int, start_line: int, start_column: int) -> Token:
        return self._error_token(
            LexicalErrorKind.UNTERMINATED_CHAR_LITERAL,
            start,
            start_line,
            start_column,
            hint="add a closing \"'\" to complete the character literal",
        )

    def _scan_operator(self, start_line: int, start_column: int) -> Token:
        """
        Scan an operator or punctuation character.

        Two-character operators win over their one-character prefixes.
        """
        cursor = self._cursor
        start = cursor.offset
        char = cursor.advance()

        pair = char + cursor.peek()
        if pair in self.TWO_CHAR_TOKENS:
            cursor.advance()
            return self._make_token(self.TWO_CHAR_TOKENS[pair], pair, start_line, start_column)

        if char in self.SINGLE_CHAR_TOKENS:
            return self._make_token(self.SINGLE_CHAR_TOKENS[char], char, start_line, start_column)

        return self._error_token(
            LexicalErrorKind.UNKNOWN_CHARACTER,
            start,
            start_line,
            start_column,
            message=f"unknown character '{char}' (U+{ord(char):04X})",
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    line_number: int = 1,
    line_comments: bool = False,
) -> list[Token]:
    """
    Scan source text in a fresh session and return every token.

    The list ends with exactly one END_OF_INPUT token. Lexical errors
    appear in the list as ERROR tokens.
    """
    lexer = Lexer(source, filename, line_number=line_number, line_comments=line_comments)
    return list(lexer.tokenize())


def tokenize_strict(source: str, options: Optional[LexerOptions] = None) -> list[Token]:
    """
    Scan source text and raise if it contains any lexical error.

    Raises:
        LexicalError: With every diagnostic found (up to options.max_errors)
    """
    options = options or LexerOptions()
    collector = DiagnosticCollector(max_errors=options.max_errors)
    tokens = collector.collect(Lexer.from_options(source, options).tokenize())
    collector.raise_if_errors()
    return tokens
