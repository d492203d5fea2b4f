"""
Source Cursor
=============

Character-stream abstraction over the text being scanned.

The cursor owns the input and hands it out one character at a time.
Once the text is exhausted, next() keeps returning the EOT sentinel
instead of signalling end-of-stream, so the tokenizer never has to
special-case exhaustion. Exactly one character can be pushed back.

Example
-------
>>> cursor = SourceCursor.from_string("ab")
>>> cursor.next(), cursor.next(), cursor.next()
('a', 'b', '\\x04')
>>> cursor.pushback()
>>> cursor.next()
'\\x04'

Copyright (c) 2026 confscan Contributors
"""

import logging
from pathlib import Path
from typing import Optional, Union

from confscan.errors import PushbackError, SourceLoadError, SourceLocation
from confscan.scanner.tokens import EOT

logger = logging.getLogger(__name__)


class SourceCursor:
    """
    Read cursor over an immutable source text.

    Tracks the line and column of every character it returns so that
    tokens and errors can be located. Not safe for concurrent use.

    Attributes:
        text: The complete source text
        filename: Name of the source (for error messages)
    """

    def __init__(self, text: str, filename: str = "<input>"):
        if EOT in text:
            raise SourceLoadError(filename, "input contains the reserved character U+0004")

        self.text = text
        self.filename = filename

        self._pos = 0
        self._pushed = False

        # Most recently returned character and its position
        self._last: Optional[str] = None
        self._last_line = 1
        self._last_column = 0
        self._last_line_start = 0

        # Position of the next character to be read
        self._line = 1
        self._column = 1
        self._line_start = 0

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "SourceCursor":
        """Create a cursor over an in-memory string."""
        return cls(text, filename)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        encoding: str = "utf-8",
    ) -> "SourceCursor":
        """
        Load an entire file and create a cursor over its contents.

        Args:
            path: File to read
            encoding: Text encoding of the file

        Raises:
            SourceLoadError: If the file cannot be opened, read or decoded
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to load {path}: {e}")
            raise SourceLoadError(str(path), str(e)) from e

        logger.debug(f"Loaded {path} ({len(text)} characters)")
        return cls(text, str(path))

    # =========================================================================
    # Reading
    # =========================================================================

    def next(self) -> str:
        """
        Return the next character, or EOT once the text is exhausted.
        """
        if self._pushed:
            self._pushed = False
            return self._last

        self._last_line = self._line
        self._last_column = self._column
        self._last_line_start = self._line_start

        if self._pos >= len(self.text):
            self._last = EOT
            return EOT

        char = self.text[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start = self._pos
        else:
            self._column += 1

        self._last = char
        return char

    def pushback(self) -> None:
        """
        Un-read the most recently returned character.

        Raises:
            PushbackError: If nothing has been read yet, or a character
                is already pushed back
        """
        if self._last is None:
            raise PushbackError("nothing to push back: no character has been read")
        if self._pushed:
            raise PushbackError("only one character can be pushed back")
        self._pushed = True

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def last(self) -> Optional[str]:
        """The most recently returned character (None before the first read)."""
        return self._last

    @property
    def at_end(self) -> bool:
        """True when the next read will return the EOT sentinel."""
        if self._pushed:
            return self._last == EOT
        return self._pos >= len(self.text)

    @property
    def last_location(self) -> SourceLocation:
        """Location of the most recently returned character."""
        return SourceLocation(self.filename, self._last_line, self._last_column)

    def current_line(self) -> str:
        """
        Return the text of the line holding the most recent character.

        Useful for error reporting.
        """
        line_end = self.text.find("\n", self._last_line_start)
        if line_end == -1:
            line_end = len(self.text)
        return self.text[self._last_line_start:line_end]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SourceCursor({self.filename!r}, pos={self._pos}, pushed={self._pushed})"
