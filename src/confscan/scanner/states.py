"""
State Handlers
==============

The tokenizer's finite-state machine, one handler per State.

Every handler is a pure function of the current character and the token
assembled so far. It returns a Step describing what happens next:

- ``state``: the state to run on the next iteration (State.END when the
  token is complete)
- ``consumed``: True if the character now belongs to the token (or was
  skipped) and the drive loop should read a fresh one; False if the same
  character must be offered to the next state
- ``token``: the updated token
- ``error``: an unraised ScanError when the input is invalid

Handlers never touch the source cursor, so each one can be tested in
isolation by feeding it a character and a token.

Rules
-----
| State          | Accepts                 | Ends with           |
|----------------|-------------------------|---------------------|
| WHITE_SPACE    | whitespace (skipped)    | -> TOKEN_START      |
| TOKEN_START    | first character         | punctuation, EOL    |
| COMMENT_START  | second '/'              | error otherwise     |
| COMMENT        | anything but newline    | END_OF_LINE         |
| IDENTIFIER     | letter, digit, '_', '-' | IDENTIFIER          |
| NEGATIVE       | digit                   | error otherwise     |
| NUMBER_PREFIX  | '.', 'x', 'X'           | error otherwise     |
| NUMBER         | digit, '.'              | INTEGER             |
| HEXADECIMAL    | 0-9 A-F a-f             | HEXADECIMAL         |
| FRACTION_START | digit                   | error otherwise     |
| FRACTION       | digit                   | FLOAT               |

Copyright (c) 2026 confscan Contributors
"""

from typing import Callable, NamedTuple, Optional
import string
import unicodedata

from confscan.errors import (
    ExpectedDecimalError,
    MalformedCommentError,
    MalformedNumberError,
    ScanError,
    UnknownTokenError,
)
from confscan.scanner.tokens import EOT, State, Token, TokenKind


class Step(NamedTuple):
    """Result of running one state handler on one character."""
    state: State
    consumed: bool
    token: Token
    error: Optional[ScanError] = None


Handler = Callable[[str, Token], Step]


# Single characters that are complete tokens by themselves
PUNCTUATION = {
    ":": TokenKind.COLON,
    "(": TokenKind.BRACKET_OPEN,
    ")": TokenKind.BRACKET_CLOSE,
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
    "\n": TokenKind.END_OF_LINE,
}

HEX_DIGITS = frozenset(string.hexdigits)

# Whitespace below U+0100; the C0 separators U+001C-U+001F are not spaces
LATIN1_SPACE = frozenset("\t\n\v\f\r \x85\xa0")

# Space, line and paragraph separators
SPACE_CATEGORIES = ("Zs", "Zl", "Zp")


def is_space(char: str) -> bool:
    """True for whitespace between tokens."""
    if ord(char) < 0x100:
        return char in LATIN1_SPACE
    return unicodedata.category(char) in SPACE_CATEGORIES


def describe(char: str) -> str:
    """Render a character for an error message."""
    if char == EOT:
        return "end of input"
    if char.isprintable():
        return f"'{char}'"
    return f"U+{ord(char):04X}"


def _fail(token: Token, error: ScanError) -> Step:
    return Step(State.END, False, token, error)


def _done(token: Token, kind: TokenKind) -> Step:
    return Step(State.END, False, token.resolve(kind))


# =============================================================================
# Handlers
# =============================================================================

def white_space(char: str, token: Token) -> Step:
    """Skip whitespace before the token."""
    if is_space(char):
        return Step(State.WHITE_SPACE, True, token)
    return Step(State.TOKEN_START, False, token)


def token_start(char: str, token: Token) -> Step:
    """Make the initial classification of a token from its first character."""
    # Punctuation and line ends are tokens all by themselves
    if char in PUNCTUATION:
        return Step(State.END, True, token.resolve(PUNCTUATION[char]))

    # Nothing left to scan; leave the sentinel for the next call
    if char == EOT:
        return _done(token, TokenKind.END_OF_INPUT)

    if char == "/":
        return Step(State.COMMENT_START, True, token)

    if char.isalpha() or char == "_":
        return Step(State.IDENTIFIER, True, token.append(char))

    if char == "-":
        return Step(State.NEGATIVE, True, token.append(char))

    # A float between 0 and 1 written without the leading zero
    if char == ".":
        return Step(State.FRACTION_START, True, token.append(char))

    # Hexadecimal, or a float that happens to start with '0'
    if char == "0":
        return Step(State.NUMBER_PREFIX, True, token.append(char))

    if char.isdecimal():
        return Step(State.NUMBER, True, token.append(char))

    return _fail(token, UnknownTokenError(f"unknown token {describe(char)}"))


def comment_start(char: str, token: Token) -> Step:
    """Check for the second '/' of a comment."""
    if char == "/":
        return Step(State.COMMENT, True, token)
    return _fail(
        token,
        MalformedCommentError(f"unknown token (expected '/', found {describe(char)})"),
    )


def comment(char: str, token: Token) -> Step:
    """Discard the comment text; the line end replaces the whole comment."""
    if char == "\n":
        return Step(State.END, True, token.resolve(TokenKind.END_OF_LINE))
    if char == EOT:
        return _done(token, TokenKind.END_OF_LINE)
    return Step(State.COMMENT, True, token)


def identifier(char: str, token: Token) -> Step:
    """Read the rest of an identifier."""
    if char.isalpha() or char.isdecimal() or char in "_-":
        return Step(State.IDENTIFIER, True, token.append(char))
    return _done(token, TokenKind.IDENTIFIER)


def negative(char: str, token: Token) -> Step:
    """A '-' must be followed by a digit."""
    if char.isdecimal():
        return Step(State.NUMBER, True, token.append(char))
    return _fail(
        token,
        MalformedNumberError(
            "invalid token (malformed number)",
            hint=f"'-' must be followed by a decimal digit, found {describe(char)}",
        ),
    )


def number_prefix(char: str, token: Token) -> Step:
    """Sort out a literal that starts with '0': float or hexadecimal."""
    if char == ".":
        return Step(State.FRACTION_START, True, token.append(char))

    # The value is kept without the 0x prefix
    if char in "xX":
        return Step(State.HEXADECIMAL, True, token.cleared())

    # TODO: decide whether a bare '0' should scan as INTEGER; it is rejected for now
    return _fail(
        token,
        MalformedNumberError(
            "invalid token (malformed number)",
            hint=f"'0' must be followed by '.', 'x' or 'X', found {describe(char)}",
        ),
    )


def number(char: str, token: Token) -> Step:
    """Read the whole part of a decimal number."""
    if char.isdecimal():
        return Step(State.NUMBER, True, token.append(char))
    if char == ".":
        return Step(State.FRACTION_START, True, token.append(char))
    return _done(token, TokenKind.INTEGER)


def hexadecimal(char: str, token: Token) -> Step:
    """Read hexadecimal digits."""
    if char in HEX_DIGITS:
        return Step(State.HEXADECIMAL, True, token.append(char))
    return _done(token, TokenKind.HEXADECIMAL)


def fraction_start(char: str, token: Token) -> Step:
    """The first character after the decimal point must be a digit."""
    if char.isdecimal():
        return Step(State.FRACTION, True, token.append(char))
    return _fail(
        token,
        ExpectedDecimalError(f"invalid token (expected decimal, found {describe(char)})"),
    )


def fraction(char: str, token: Token) -> Step:
    """Read the remaining digits after the decimal point."""
    if char.isdecimal():
        return Step(State.FRACTION, True, token.append(char))
    return _done(token, TokenKind.FLOAT)


# =============================================================================
# Dispatch Table
# =============================================================================

STATE_TABLE: dict[State, Handler] = {
    State.WHITE_SPACE: white_space,
    State.TOKEN_START: token_start,
    State.COMMENT_START: comment_start,
    State.COMMENT: comment,
    State.IDENTIFIER: identifier,
    State.NEGATIVE: negative,
    State.NUMBER_PREFIX: number_prefix,
    State.NUMBER: number,
    State.HEXADECIMAL: hexadecimal,
    State.FRACTION_START: fraction_start,
    State.FRACTION: fraction,
}
