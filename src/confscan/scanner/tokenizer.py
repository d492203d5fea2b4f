"""
Tokenizer
=========

Drives the state table over characters pulled from a SourceCursor and
returns one classified token per call.

Each call to next_token() starts in WHITE_SPACE with an empty token and
runs handlers until one reaches State.END. The character that ended the
token belongs to the next one, so it is pushed back onto the cursor.
The first handler error aborts the call; the partial token is dropped
and the cursor is left on the offending character.

Example
-------
>>> tokenizer = Tokenizer.from_string("port: 0x1F90 // http")
>>> for token in tokenizer.tokenize():
...     print(token)
Token(IDENTIFIER, 'port', 1:1)
Token(COLON, 1:5)
Token(HEXADECIMAL, '1F90', 1:7)
Token(END_OF_LINE, 1:14)
Token(END_OF_INPUT, 1:21)

Copyright (c) 2026 confscan Contributors
"""

import logging
from pathlib import Path
from typing import Iterator, Union

from confscan.scanner.source import SourceCursor
from confscan.scanner.states import STATE_TABLE
from confscan.scanner.tokens import State, Token, TokenKind

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    Hand-crafted finite-state tokenizer.

    A Tokenizer exclusively owns its SourceCursor. Separate tokenizers
    share nothing, but a single instance is not safe for concurrent use.

    Usage:
        tokenizer = Tokenizer.from_file("server.conf")
        token = tokenizer.next_token()

    Attributes:
        source: The cursor being scanned
    """

    def __init__(self, source: SourceCursor):
        self.source = source

    @classmethod
    def from_string(cls, text: str, filename: str = "<input>") -> "Tokenizer":
        """Start a scanning session over an in-memory string."""
        return cls(SourceCursor.from_string(text, filename))

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> "Tokenizer":
        """
        Start a scanning session over a file.

        Raises:
            SourceLoadError: If the file cannot be opened or read
        """
        return cls(SourceCursor.from_file(path, encoding=encoding))

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns an END_OF_INPUT token (again on every later call) once
        only the end-of-input sentinel remains.

        Raises:
            ScanError: If the input at the cursor is not a valid token
        """
        state = State.WHITE_SPACE
        token = Token()
        char = self.source.next()
        start = None

        while state is not State.END:
            # TOKEN_START runs exactly once per token, on its first character
            if state is State.TOKEN_START:
                start = self.source.last_location

            step = STATE_TABLE[state](char, token)

            if step.error is not None:
                error = step.error.at(self.source.last_location, self.source.current_line())
                logger.debug(f"Scan failed in {state.name}: {error.message}")
                raise error

            state, token = step.state, step.token
            if step.consumed:
                char = self.source.next()

        self.source.pushback()

        token = Token(token.kind, token.value, start)
        logger.debug(f"Scanned {token!r}")
        return token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including END_OF_INPUT.

        Raises:
            ScanError: On the first invalid token
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_INPUT:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def skip_line(self) -> None:
        """
        Discard the rest of the current line after a scan error.

        Characters are read up to and including the next newline. If
        the offending character was itself a newline nothing is read.
        At the end of input the next call returns END_OF_INPUT.
        """
        char = self.source.last
        while char != "\n" and not self.source.at_end:
            char = self.source.next()
