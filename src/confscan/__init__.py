"""
confscan - Lexical Scanner for a Small Configuration Language
=============================================================

This package converts configuration source text into a stream of
classified tokens, one token per call.

The language is line oriented and deliberately small:

    server {
        name: primary-01
        port: 8080          // decimal integer
        mask: 0xFF00        // hexadecimal, stored as "FF00"
        ratio: .75
        offset: -12
    }

Main Components
---------------
- **scanner.source**: SourceCursor
    Owns the input text; reads one character at a time, supports a single
    pushback and returns the EOT sentinel at end of input

- **scanner.tokenizer**: Tokenizer
    Table-driven finite-state machine producing Token objects

- **errors**: Exception hierarchy
    ScanError subclasses for every lexical failure, with source locations

- **cli**: Command-line tool (cscan)
    Prints the tokens of a file, optionally collecting every error

Quick Start
-----------
Scan a string:
    >>> from confscan import Tokenizer
    >>> tokenizer = Tokenizer.from_string("ratio: 0.5")
    >>> [t.kind.name for t in tokenizer.tokenize()]
    ['IDENTIFIER', 'COLON', 'FLOAT', 'END_OF_INPUT']

Or use the command-line tool:
    $ cscan server.conf
    $ cscan --keep-going --format json server.conf
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from confscan.config import ScanConfig, get_default_config, set_default_config
from confscan.errors import (
    ConfScanError,
    SourceLocation,
    SourceLoadError,
    PushbackError,
    ScanError,
    UnknownTokenError,
    MalformedCommentError,
    MalformedNumberError,
    ExpectedDecimalError,
    ErrorCollector,
    TooManyErrors,
)
from confscan.scanner import (
    EOT,
    STATE_TABLE,
    SourceCursor,
    State,
    Step,
    Token,
    TokenKind,
    Tokenizer,
)

__all__ = [
    "__version__",
    # Scanner
    "EOT",
    "STATE_TABLE",
    "SourceCursor",
    "State",
    "Step",
    "Token",
    "TokenKind",
    "Tokenizer",
    # Configuration
    "ScanConfig",
    "get_default_config",
    "set_default_config",
    # Exception hierarchy
    "ConfScanError",
    "SourceLocation",
    "SourceLoadError",
    "PushbackError",
    "ScanError",
    "UnknownTokenError",
    "MalformedCommentError",
    "MalformedNumberError",
    "ExpectedDecimalError",
    "ErrorCollector",
    "TooManyErrors",
]
