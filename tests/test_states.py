# =============================================================================
# test_states.py - State Handler Unit Tests
# =============================================================================
# Every handler is a pure function of (character, token), so each one is
# tested on its own without a source cursor.
#
# Test coverage includes:
#   - Whitespace skipping and hand-off to TOKEN_START
#   - First-character dispatch for every token family
#   - Comment, identifier, and number-family transitions
#   - Errors returned by value (never raised by a handler)
# =============================================================================

import pytest

from confscan.errors import (
    ExpectedDecimalError,
    MalformedCommentError,
    MalformedNumberError,
    UnknownTokenError,
)
from confscan.scanner.states import (
    STATE_TABLE,
    Step,
    comment,
    comment_start,
    fraction,
    fraction_start,
    hexadecimal,
    identifier,
    negative,
    number,
    number_prefix,
    token_start,
    white_space,
)
from confscan.scanner.tokens import EOT, State, Token, TokenKind


def partial(value: str) -> Token:
    """Token under construction holding value."""
    return Token(value=value)


# =============================================================================
# Token Value Tests
# =============================================================================

class TestToken:
    """Test the immutable token helpers."""

    def test_new_token(self):
        """A fresh token is unknown and empty."""
        token = Token()
        assert token.kind is TokenKind.UNKNOWN
        assert token.value == ""

    def test_append(self):
        """append returns a new token and leaves the original alone."""
        token = Token()
        grown = token.append("A")
        assert grown.value == "A"
        assert grown.kind is TokenKind.UNKNOWN
        assert token.value == ""

    def test_resolve(self):
        """resolve sets the kind and keeps the value."""
        token = partial("42").resolve(TokenKind.INTEGER)
        assert token.kind is TokenKind.INTEGER
        assert token.value == "42"

    def test_cleared(self):
        """cleared drops the value."""
        assert partial("0x").cleared().value == ""


# =============================================================================
# Dispatch Table Tests
# =============================================================================

class TestStateTable:
    """Test the mapping from states to handlers."""

    def test_every_state_has_handler(self):
        """All states except END are dispatchable."""
        expected = {state for state in State if state is not State.END}
        assert set(STATE_TABLE) == expected

    def test_end_has_no_handler(self):
        """END terminates the drive loop and is never dispatched."""
        assert State.END not in STATE_TABLE

    def test_handlers_are_callable(self):
        """Each entry returns a Step."""
        for handler in STATE_TABLE.values():
            assert isinstance(handler(EOT, Token()), Step)


# =============================================================================
# Whitespace Tests
# =============================================================================

class TestWhiteSpace:
    """Test the WHITE_SPACE handler."""

    @pytest.mark.parametrize("char", [" ", "\t", "\n", "\r"])
    def test_skips_whitespace(self, char):
        """Whitespace is consumed and the state stays WHITE_SPACE."""
        step = white_space(char, Token())
        assert step.state is State.WHITE_SPACE
        assert step.consumed
        assert step.token == Token()
        assert step.error is None

    def test_hands_off(self):
        """A non-space character is passed to TOKEN_START unconsumed."""
        step = white_space("X", Token())
        assert step.state is State.TOKEN_START
        assert not step.consumed
        assert step.token.kind is TokenKind.UNKNOWN
        assert step.token.value == ""

    def test_sentinel_is_not_space(self):
        """End of input ends the whitespace run."""
        assert white_space(EOT, Token()).state is State.TOKEN_START

    @pytest.mark.parametrize("char", ["\v", "\f", "\x85", "\xa0", "\u2028", "\u2029", "\u3000"])
    def test_unicode_spaces_skipped(self, char):
        """Vertical tab, form feed, NEL, NBSP and the Z separators are skipped."""
        step = white_space(char, Token())
        assert step.state is State.WHITE_SPACE
        assert step.consumed

    @pytest.mark.parametrize("char", ["\x1c", "\x1d", "\x1e", "\x1f", "\u200b"])
    def test_separator_controls_not_skipped(self, char):
        """The C0 file/group/record/unit separators and ZWSP are not whitespace."""
        step = white_space(char, Token())
        assert step.state is State.TOKEN_START
        assert not step.consumed


# =============================================================================
# Token Start Tests
# =============================================================================

class TestTokenStart:
    """Test the first-character classification."""

    @pytest.mark.parametrize("char, kind", [
        (":", TokenKind.COLON),
        ("(", TokenKind.BRACKET_OPEN),
        (")", TokenKind.BRACKET_CLOSE),
        ("{", TokenKind.BRACE_OPEN),
        ("}", TokenKind.BRACE_CLOSE),
        ("\n", TokenKind.END_OF_LINE),
    ])
    def test_single_character_tokens(self, char, kind):
        """Punctuation is consumed and ends the token with an empty value."""
        step = token_start(char, Token())
        assert step.state is State.END
        assert step.consumed
        assert step.token.kind is kind
        assert step.token.value == ""

    @pytest.mark.parametrize("char, state", [
        ("a", State.IDENTIFIER),
        ("Z", State.IDENTIFIER),
        ("_", State.IDENTIFIER),
        ("-", State.NEGATIVE),
        (".", State.FRACTION_START),
        ("0", State.NUMBER_PREFIX),
        ("1", State.NUMBER),
        ("9", State.NUMBER),
    ])
    def test_starts_accumulating(self, char, state):
        """Value-carrying tokens append their first character."""
        step = token_start(char, Token())
        assert step.state is state
        assert step.consumed
        assert step.token.value == char

    def test_comment_start(self):
        """A slash starts a comment without adding to the value."""
        step = token_start("/", Token())
        assert step.state is State.COMMENT_START
        assert step.consumed
        assert step.token.value == ""

    def test_end_of_input(self):
        """The sentinel produces END_OF_INPUT and is left for the next call."""
        step = token_start(EOT, Token())
        assert step.state is State.END
        assert not step.consumed
        assert step.token.kind is TokenKind.END_OF_INPUT

    @pytest.mark.parametrize("char", ["%", "=", '"', "+", "#"])
    def test_unknown_token(self, char):
        """Characters matching no rule are returned as errors."""
        step = token_start(char, Token())
        assert isinstance(step.error, UnknownTokenError)
        assert "unknown token" in step.error.message
        assert repr(char) in step.error.message or f"'{char}'" in step.error.message

    def test_unicode_letter_starts_identifier(self):
        """Letters outside ASCII are letters too."""
        assert token_start("é", Token()).state is State.IDENTIFIER

    @pytest.mark.parametrize("char", ["\u0663", "\uff17"])
    def test_unicode_decimal_starts_number(self, char):
        """Decimal digits from other scripts start a NUMBER."""
        assert token_start(char, Token()).state is State.NUMBER

    @pytest.mark.parametrize("char", ["²", "①", "½"])
    def test_numeric_symbols_unknown(self, char):
        """Superscripts, circled digits and fractions are not digits."""
        step = token_start(char, Token())
        assert isinstance(step.error, UnknownTokenError)
        assert f"'{char}'" in step.error.message

    def test_separator_control_unknown(self):
        """A C0 separator reaching TOKEN_START is reported by code point."""
        step = token_start("\x1c", Token())
        assert isinstance(step.error, UnknownTokenError)
        assert "U+001C" in step.error.message


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Test the COMMENT_START and COMMENT handlers."""

    def test_second_slash(self):
        """A second slash enters the comment body."""
        step = comment_start("/", Token())
        assert step.state is State.COMMENT
        assert step.consumed

    def test_missing_second_slash(self):
        """Block comments do not exist."""
        step = comment_start("*", Token())
        assert isinstance(step.error, MalformedCommentError)
        assert "expected '/'" in step.error.message

    def test_body_discarded(self):
        """Comment text never reaches the token value."""
        step = comment("x", Token())
        assert step.state is State.COMMENT
        assert step.consumed
        assert step.token.value == ""

    def test_newline_ends_comment(self):
        """The newline is consumed and becomes END_OF_LINE."""
        step = comment("\n", Token())
        assert step.state is State.END
        assert step.consumed
        assert step.token.kind is TokenKind.END_OF_LINE
        assert step.token.value == ""

    def test_sentinel_ends_comment(self):
        """A comment on the last line ends at end of input."""
        step = comment(EOT, Token())
        assert step.state is State.END
        assert not step.consumed
        assert step.token.kind is TokenKind.END_OF_LINE


# =============================================================================
# Identifier Tests
# =============================================================================

class TestIdentifier:
    """Test the IDENTIFIER handler."""

    @pytest.mark.parametrize("char", ["a", "Q", "7", "_", "-"])
    def test_continues(self, char):
        """Letters, digits, underscores and dashes extend an identifier."""
        step = identifier(char, partial("name"))
        assert step.state is State.IDENTIFIER
        assert step.token.value == "name" + char

    @pytest.mark.parametrize("char", [" ", ":", "\n", ".", EOT, "²", "\x1c"])
    def test_terminates(self, char):
        """Anything else ends the identifier without consuming."""
        step = identifier(char, partial("name"))
        assert step.state is State.END
        assert not step.consumed
        assert step.token.kind is TokenKind.IDENTIFIER
        assert step.token.value == "name"


# =============================================================================
# Number Family Tests
# =============================================================================

class TestNegative:
    """Test the NEGATIVE handler."""

    def test_digit(self):
        """A digit after '-' continues as a number."""
        step = negative("4", partial("-"))
        assert step.state is State.NUMBER
        assert step.token.value == "-4"

    @pytest.mark.parametrize("char", [" ", "x", ".", EOT, "²"])
    def test_non_digit(self, char):
        """A bare '-' is never a token."""
        step = negative(char, partial("-"))
        assert isinstance(step.error, MalformedNumberError)
        assert "malformed number" in step.error.message


class TestNumberPrefix:
    """Test the NUMBER_PREFIX handler."""

    def test_float(self):
        """'0.' continues as a fraction."""
        step = number_prefix(".", partial("0"))
        assert step.state is State.FRACTION_START
        assert step.token.value == "0."

    @pytest.mark.parametrize("char", ["x", "X"])
    def test_hexadecimal(self, char):
        """'0x' drops the prefix and reads hexadecimal digits."""
        step = number_prefix(char, partial("0"))
        assert step.state is State.HEXADECIMAL
        assert step.consumed
        assert step.token.value == ""

    @pytest.mark.parametrize("char", [" ", "7", "\n", EOT])
    def test_lone_zero_rejected(self, char):
        """A '0' not followed by '.', 'x' or 'X' is malformed."""
        step = number_prefix(char, partial("0"))
        assert isinstance(step.error, MalformedNumberError)


class TestNumber:
    """Test the NUMBER handler."""

    def test_digits(self):
        """Digits are appended."""
        step = number("3", partial("4"))
        assert step.state is State.NUMBER
        assert step.token.value == "43"

    def test_decimal_point(self):
        """A '.' switches to the fraction."""
        step = number(".", partial("12"))
        assert step.state is State.FRACTION_START
        assert step.token.value == "12."

    @pytest.mark.parametrize("char", [" ", "a", ":", EOT, "²", "①"])
    def test_terminates(self, char):
        """Anything else ends an INTEGER."""
        step = number(char, partial("-42"))
        assert step.state is State.END
        assert not step.consumed
        assert step.token.kind is TokenKind.INTEGER
        assert step.token.value == "-42"


class TestHexadecimal:
    """Test the HEXADECIMAL handler."""

    @pytest.mark.parametrize("char", ["0", "9", "a", "f", "A", "F"])
    def test_hex_digits(self, char):
        """Both letter cases are hexadecimal digits."""
        step = hexadecimal(char, partial("1"))
        assert step.state is State.HEXADECIMAL
        assert step.token.value == "1" + char

    @pytest.mark.parametrize("char", ["g", "G", " ", EOT])
    def test_terminates(self, char):
        """Non-hex characters end the literal."""
        step = hexadecimal(char, partial("1A"))
        assert step.state is State.END
        assert step.token.kind is TokenKind.HEXADECIMAL
        assert step.token.value == "1A"


class TestFraction:
    """Test the FRACTION_START and FRACTION handlers."""

    def test_first_digit(self):
        """A digit after the point starts the fraction."""
        step = fraction_start("5", partial("0."))
        assert step.state is State.FRACTION
        assert step.token.value == "0.5"

    @pytest.mark.parametrize("char", [" ", ".", "e", EOT, "²"])
    def test_missing_digit(self, char):
        """A dangling '.' is an error."""
        step = fraction_start(char, partial("."))
        assert isinstance(step.error, ExpectedDecimalError)
        assert "expected decimal" in step.error.message

    def test_more_digits(self):
        """Further digits are appended."""
        step = fraction("7", partial("0.5"))
        assert step.state is State.FRACTION
        assert step.token.value == "0.57"

    @pytest.mark.parametrize("char", [" ", ".", "x", EOT, "²"])
    def test_terminates(self, char):
        """Anything else ends a FLOAT."""
        step = fraction(char, partial("0.5"))
        assert step.state is State.END
        assert not step.consumed
        assert step.token.kind is TokenKind.FLOAT
        assert step.token.value == "0.5"
