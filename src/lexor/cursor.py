"""
Source Cursor
=============

Owns the immutable source text and the current offset, line and column.
The lexer reads the source exclusively through this class, one character
at a time, with at most one extra character of lookahead.
"""

# Returned by peek operations once the source is exhausted
END_OF_INPUT = ""


class SourceCursor:
    """
    Forward-only position over an immutable source string.

    Attributes:
        source: The text being scanned
        offset: Index of the next unconsumed character
        line: Current line number (1-indexed)
        column: Current column number (1-indexed)
    """

    def __init__(self, source: str, line_number: int = 1):
        self.source = source
        self.offset = 0
        self.line = line_number
        self.column = 1

        # Offset of the first character of the current line
        self._line_start = 0

    def at_end(self) -> bool:
        return self.offset >= len(self.source)

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.offset >= len(self.source):
            return END_OF_INPUT
        return self.source[self.offset]

    def peek_next(self) -> str:
        """Return the character after the current one without consuming it."""
        pos = self.offset + 1
        if pos >= len(self.source):
            return END_OF_INPUT
        return self.source[pos]

    def advance(self) -> str:
        """
        Consume and return the current character.

        Consuming a line feed moves to column 1 of the next line. At end of
        input nothing moves and END_OF_INPUT is returned.
        """
        if self.at_end():
            return END_OF_INPUT

        char = self.source[self.offset]
        self.offset += 1

        if char == "\n":
            self.line += 1
            self.column = 1
            self._line_start = self.offset
        else:
            self.column += 1

        return char

    def match(self, expected: str) -> bool:
        """Consume the current character if it equals expected."""
        if self.peek() == expected:
            self.advance()
            return True
        return False

    def slice_from(self, start: int) -> str:
        """Return the source text consumed since offset start."""
        return self.source[start:self.offset]

    def current_line_text(self) -> str:
        """Get the physical line being scanned, without its terminator."""
        line_end = self.source.find("\n", self._line_start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start:line_end]
