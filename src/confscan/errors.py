"""
confscan Error Hierarchy
========================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from ConfScanError, allowing callers to catch
every scanner-related error with a single except clause if desired.

Exception Hierarchy
-------------------
ConfScanError (base)
├── SourceLoadError - input file cannot be opened or read
├── PushbackError - source cursor pushed back more than one character
└── ScanError (lexical errors)
    ├── UnknownTokenError - character matches no token rule
    ├── MalformedCommentError - '/' not followed by a second '/'
    ├── MalformedNumberError - '-' or leading '0' not followed correctly
    ├── ExpectedDecimalError - '.' not followed by a digit
    └── TooManyErrors - error collector limit reached

Error Message Format
--------------------
Scan errors carry source location information and follow this format:

    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Copyright (c) 2026 confscan Contributors
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ConfScanError(Exception):
    """
    Base exception for all confscan errors.

    Catch this to handle any failure raised by the package:

        try:
            token = tokenizer.next_token()
        except ConfScanError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text, used for tokens and error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Source Cursor Exceptions
# =============================================================================

class SourceLoadError(ConfScanError):
    """
    Input cannot be opened or read.

    Raised when constructing a scanning session from:
    - A path that does not exist or is a directory
    - A file without read permission
    - Bytes that cannot be decoded with the requested encoding
    - Text containing the reserved end-of-input sentinel
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"cannot open/read input '{source}': {reason}")


class PushbackError(ConfScanError):
    """
    The source cursor was asked to un-read more than one character.

    The cursor keeps a single pushback slot. Calling pushback() twice
    without an intervening next(), or before anything was read, is a
    programming error in the caller.
    """
    pass


# =============================================================================
# Scan Exceptions
# =============================================================================

class ScanError(ConfScanError):
    """
    Base exception for lexical errors found while classifying a token.

    State handlers create these without a location and hand them back
    by value; the tokenizer attaches the location and source line with
    at() before raising.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    default_hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint if hint is not None else self.default_hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def at(
        self,
        location: Optional[SourceLocation],
        source_line: Optional[str] = None,
    ) -> "ScanError":
        """Return a copy of this error positioned at the given location."""
        return type(self)(
            self.message,
            location=location,
            hint=self.hint,
            source_line=source_line,
        )

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            server.conf:3:9: error: invalid token (malformed number)
                port: -x
                       ^
            hint: a '-' must be followed by a decimal digit
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnknownTokenError(ScanError):
    """
    A character at the start of a token matches none of the token rules.

    Examples:
        - '%' or '=' anywhere outside a comment
        - A stray quote character
    """
    pass


class MalformedCommentError(ScanError):
    """
    A '/' was not followed by a second '/'.

    Only line comments ('// ...') exist; there are no block comments.
    """

    default_hint = "comments start with '//' and run to the end of the line"


class MalformedNumberError(ScanError):
    """
    A numeric literal started but cannot be completed.

    Raised when:
    - A '-' is not followed by a decimal digit
    - A leading '0' is not followed by '.', 'x' or 'X'
    """
    pass


class ExpectedDecimalError(ScanError):
    """
    A decimal point was not followed by a digit.

    Both '.5' and '1.5' are valid, but a dangling '.' or '1.' is not.
    """

    default_hint = "write at least one digit after the decimal point"


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects multiple scan errors for batch reporting.

    The scanner itself stops at the first error. Callers that want to
    report every problem in a file catch each ScanError, add it here,
    skip to the next line and carry on:

        collector = ErrorCollector(max_errors=100)
        try:
            ...
            collector.add(error)
        except TooManyErrors:
            pass

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before raising TooManyErrors
        """
        self.errors: list[ScanError] = []
        self.max_errors = max_errors

    def add(self, error: ScanError) -> None:
        """
        Add an error to the collection.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self.errors.append(error)
        if len(self.errors) >= self.max_errors:
            raise TooManyErrors(f"too many errors ({self.max_errors}), stopping")

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """
        Format all collected errors for display.

        Returns:
            Formatted string with every error and a summary line
        """
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()


class TooManyErrors(ScanError):
    """
    Raised when the error collector reaches its limit.

    This stops a keep-going scan of a badly broken file from
    flooding the terminal.
    """

    def __init__(self, message: str = "too many errors", **kwargs):
        super().__init__(message, **kwargs)
