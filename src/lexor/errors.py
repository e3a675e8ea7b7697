"""
LEXOR Error Hierarchy
=====================

This module defines the exception hierarchy and diagnostic types for the
LEXOR scanner. All exceptions inherit from LexorError, allowing callers to
catch every package error with a single except clause.

Lexical errors are NOT raised by the scanner. They are reported in-band as
ERROR tokens carrying a Diagnostic, so that one scan can surface several
independent mistakes. Callers that prefer to fail fast collect those
diagnostics with DiagnosticCollector and call raise_if_errors().

Exception Hierarchy
-------------------
LexorError (base)
└── LexicalError - one or more lexical errors in a token stream

Diagnostic Format
-----------------
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lexor.tokens import Token


# =============================================================================
# Base Exception Class
# =============================================================================

class LexorError(Exception):
    """
    Base exception for all LEXOR package errors.

        try:
            tokens = tokenize_strict(source)
        except LexorError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text.

    Attributes:
        filename: Name of the source buffer (or "<input>")
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Diagnostics
# =============================================================================

class LexicalErrorKind(Enum):
    """Classification of recoverable lexical errors."""

    UNTERMINATED_STRING = "unterminated string literal"
    UNTERMINATED_CHAR_LITERAL = "unterminated character literal"
    MALFORMED_CHAR_LITERAL = "malformed character literal"
    MALFORMED_NUMBER = "malformed number"
    UNKNOWN_CHARACTER = "unknown character"


@dataclass(frozen=True)
class Diagnostic:
    """
    Description of one lexical error, attached to an ERROR token.

    Attributes:
        kind: The LexicalErrorKind
        message: Human-readable description of the problem
        location: Where the offending span starts
        hint: A suggestion for fixing the error (optional)
        source_line: The physical source line containing the error (optional)
    """
    kind: LexicalErrorKind
    message: str
    location: SourceLocation
    hint: Optional[str] = None
    source_line: Optional[str] = None

    def __str__(self) -> str:
        return self.format()

    def format(self) -> str:
        """
        Format the diagnostic with location, source context, and hint.

        Example output:
            demo.lex:3:15: error: unterminated string literal
                PRINT: "hello
                       ^
            hint: add a closing '"' before the end of the line
        """
        parts = [f"{self.location}: error: {self.message}"]

        if self.source_line is not None and self.location.column > 0:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class LexicalError(LexorError):
    """
    One or more lexical errors found in a token stream.

    Raised only on request (DiagnosticCollector.raise_if_errors() or
    tokenize_strict()); the scanner itself always recovers.

    Attributes:
        diagnostics: The collected Diagnostic objects
    """

    def __init__(self, diagnostics: List[Diagnostic], report: Optional[str] = None):
        self.diagnostics = list(diagnostics)
        if report is None:
            report = "\n".join(d.format() for d in self.diagnostics)
        super().__init__(report)


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class DiagnosticCollector:
    """
    Collects diagnostics from ERROR tokens for batch reporting.

    Example:
        collector = DiagnosticCollector(max_errors=100)
        tokens = collector.collect(lexer.tokenize())
        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        self.diagnostics: List[Diagnostic] = []
        self.max_errors = max_errors
        self.dropped = 0

    def add(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic, counting it as dropped once the cap is reached."""
        if self.should_stop():
            self.dropped += 1
            return
        self.diagnostics.append(diagnostic)

    def collect(self, tokens: Iterable["Token"]) -> List["Token"]:
        """
        Drain a token stream, recording the diagnostic of every ERROR token.

        Returns:
            All tokens, in order, including the ERROR tokens
        """
        result = []
        for token in tokens:
            if token.diagnostic is not None:
                self.add(token.diagnostic)
            result.append(token)
        return result

    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.diagnostics) >= self.max_errors

    def error_count(self) -> int:
        """Number of errors seen, including those beyond max_errors."""
        return len(self.diagnostics) + self.dropped

    def report(self) -> str:
        """Format all diagnostics followed by a summary line."""
        lines = []
        for diagnostic in self.diagnostics:
            lines.append(diagnostic.format())
            lines.append("")

        if self.dropped:
            lines.append(f"({self.dropped} more not shown)")

        count = self.error_count()
        error_word = "error" if count == 1 else "errors"
        lines.append(f"{count} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        self.diagnostics.clear()
        self.dropped = 0

    def raise_if_errors(self) -> None:
        """Raise a LexicalError if any diagnostics were collected."""
        if self.has_errors():
            raise LexicalError(self.diagnostics, self.report())
