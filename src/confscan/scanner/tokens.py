"""
Token Model
===========

Token kinds, scanner states and the immutable Token value produced by
the tokenizer.

Token Kinds
-----------
- IDENTIFIER: names such as ``server_name`` or ``max-retries``
- INTEGER: signed decimal literals (``42``, ``-7``), kept as text
- HEXADECIMAL: ``0x1A`` style literals, stored without the prefix
- FLOAT: ``0.5``, ``.25``, ``-3.75``, kept as text
- COLON, BRACKET_OPEN, BRACKET_CLOSE, BRACE_OPEN, BRACE_CLOSE: punctuation
- END_OF_LINE: a line break closing a ``//`` comment
- END_OF_INPUT: only the end-of-input sentinel remains

UNKNOWN is the kind of a token that is still being assembled; no token
handed to a caller ever carries it.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional

from confscan.errors import SourceLocation


# End of Transmission. Substituted for true end-of-input so that every
# state handler can treat exhaustion as an ordinary non-matching character.
EOT = "\x04"


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Classification of a scanned token."""

    UNKNOWN = auto()        # Token still being assembled

    # Values
    IDENTIFIER = auto()
    INTEGER = auto()
    HEXADECIMAL = auto()
    FLOAT = auto()

    # Punctuation
    COLON = auto()          # :
    BRACKET_OPEN = auto()   # (
    BRACKET_CLOSE = auto()  # )
    BRACE_OPEN = auto()     # {
    BRACE_CLOSE = auto()    # }

    # Structural
    END_OF_LINE = auto()
    END_OF_INPUT = auto()


# =============================================================================
# Scanner State Enumeration
# =============================================================================

class State(Enum):
    """States of the tokenizer's finite-state machine."""

    WHITE_SPACE = auto()     # Skipping leading whitespace
    TOKEN_START = auto()     # Classifying the first character
    COMMENT_START = auto()   # Saw '/', expecting a second '/'
    COMMENT = auto()         # Discarding comment text
    IDENTIFIER = auto()      # Reading identifier characters
    NEGATIVE = auto()        # Saw '-', expecting a digit
    NUMBER_PREFIX = auto()   # Saw leading '0': float or hexadecimal
    NUMBER = auto()          # Reading decimal digits
    HEXADECIMAL = auto()     # Reading hexadecimal digits
    FRACTION_START = auto()  # Saw '.', expecting a digit
    FRACTION = auto()        # Reading digits after the '.'
    END = auto()             # Token complete


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from the source text.

    Tokens are immutable. While a token is being assembled each state
    handler returns a new Token via append() or resolve(), so no handler
    ever mutates shared data.

    Attributes:
        kind: The TokenKind classification
        value: Literal text of the token (empty for punctuation and
            line ends)
        location: Position of the token's first character, when known
    """
    kind: TokenKind = TokenKind.UNKNOWN
    value: str = ""
    location: Optional[SourceLocation] = None

    def __repr__(self) -> str:
        where = f", {self.location.line}:{self.location.column}" if self.location else ""
        if self.value:
            return f"Token({self.kind.name}, {self.value!r}{where})"
        return f"Token({self.kind.name}{where})"

    def append(self, char: str) -> "Token":
        """Return a copy of this token with char added to its value."""
        return replace(self, value=self.value + char)

    def resolve(self, kind: TokenKind) -> "Token":
        """Return a copy of this token classified as kind."""
        return replace(self, kind=kind)

    def cleared(self) -> "Token":
        """Return a copy of this token with an empty value."""
        return replace(self, value="")
