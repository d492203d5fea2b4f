"""
Lexical Scanner
===============

The core of confscan: a character cursor and a table-driven tokenizer.

- **source**: SourceCursor, one-character pushback over the input text
- **tokens**: TokenKind, State, Token and the EOT sentinel
- **states**: pure state handlers and the STATE_TABLE
- **tokenizer**: Tokenizer, the drive loop producing one token per call
"""

from confscan.scanner.source import SourceCursor
from confscan.scanner.states import STATE_TABLE, Step
from confscan.scanner.tokenizer import Tokenizer
from confscan.scanner.tokens import EOT, State, Token, TokenKind

__all__ = [
    "EOT",
    "STATE_TABLE",
    "SourceCursor",
    "State",
    "Step",
    "Token",
    "TokenKind",
    "Tokenizer",
]
