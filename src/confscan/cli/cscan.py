"""
cscan - Configuration Scanner Command-Line Interface
====================================================

This module implements the command-line interface for the tokenizer.
It loads a source file, scans it token by token and prints the result.

Usage Examples
--------------
Print the tokens of a file:
    $ cscan server.conf

Report every bad line instead of stopping at the first:
    $ cscan --keep-going server.conf

Machine-readable output:
    $ cscan --format json server.conf

Verbose mode (debug logging of every token):
    $ cscan -v server.conf

Copyright (c) 2026 confscan Contributors
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from confscan import __version__
from confscan.cli.errors import ExitCode, handle_cli_exception
from confscan.config import OUTPUT_FORMATS, get_default_config
from confscan.errors import ErrorCollector, ScanError, TooManyErrors
from confscan.scanner import Token, TokenKind, Tokenizer

logger = logging.getLogger(__name__)


# =============================================================================
# Scanning Helpers
# =============================================================================

def scan_tokens(
    tokenizer: Tokenizer,
    collector: Optional[ErrorCollector] = None,
) -> list[Token]:
    """
    Scan the whole input, up to and including END_OF_INPUT.

    Without a collector the first ScanError propagates. With one, each
    error is recorded and scanning resumes on the next line.

    Raises:
        ScanError: On the first error when no collector is given
        TooManyErrors: When the collector reaches its limit
    """
    tokens = []
    while True:
        try:
            token = tokenizer.next_token()
        except ScanError as e:
            if collector is None:
                raise
            collector.add(e)
            logger.info(f"Recovering after error at {e.location}")
            tokenizer.skip_line()
            continue

        tokens.append(token)
        if token.kind is TokenKind.END_OF_INPUT:
            return tokens


def format_token(token: Token) -> str:
    """Format a token as 'line:column  KIND  'value''."""
    where = f"{token.location.line}:{token.location.column}" if token.location else "?"
    text = f"{where:<8} {token.kind.name}"
    if token.value:
        text += f"  {token.value!r}"
    return text


def token_to_dict(token: Token) -> dict:
    """Convert a token to a JSON-serializable dictionary."""
    return {
        "kind": token.kind.name,
        "value": token.value,
        "line": token.location.line if token.location else None,
        "column": token.location.column if token.location else None,
    }


def setup_logging(verbose: bool, level_name: str) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-k", "--keep-going/--stop-on-error",
    default=None,
    help="After an error, skip to the next line and keep scanning. "
         "Default: stop on the first error.",
)
@click.option(
    "-m", "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum errors to collect with --keep-going (default: 100)",
)
@click.option(
    "-e", "--encoding",
    default=None,
    help="Input file encoding (default: utf-8)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: text)",
)
@click.option(
    "--echo",
    is_flag=True,
    help="Print the source text before the tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="cscan")
def main(
    input_file: Path,
    keep_going: Optional[bool],
    max_errors: Optional[int],
    encoding: Optional[str],
    output_format: Optional[str],
    echo: bool,
    verbose: bool,
) -> None:
    """
    Scan a configuration file and print its tokens.

    INPUT_FILE is the source file to tokenize.

    \b
    Examples:
        cscan server.conf                # One token per line
        cscan -k server.conf             # Report every bad line
        cscan -f json server.conf        # JSON array of tokens

    Defaults can also be set with the CONFSCAN_ENCODING,
    CONFSCAN_MAX_ERRORS, CONFSCAN_KEEP_GOING, CONFSCAN_LOG_LEVEL and
    CONFSCAN_FORMAT environment variables.
    """
    config = get_default_config()

    # Command-line flags override configuration
    if keep_going is None:
        keep_going = config.keep_going
    if max_errors is None:
        max_errors = config.max_errors
    if encoding is None:
        encoding = config.encoding
    output_format = (output_format or config.output_format).lower()

    setup_logging(verbose, config.log_level)

    collector = ErrorCollector(max_errors=max_errors) if keep_going else None

    try:
        if verbose:
            click.echo(f"Scanning {input_file} ({encoding})...", err=True)

        tokenizer = Tokenizer.from_file(input_file, encoding=encoding)

        if echo:
            click.echo(str(tokenizer.source))

        try:
            tokens = scan_tokens(tokenizer, collector)
        except TooManyErrors as e:
            click.echo(collector.report(), err=True)
            click.echo(f"error: {e.message}", err=True)
            sys.exit(ExitCode.SCAN_ERROR)

        if output_format == "json":
            click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
        else:
            for token in tokens:
                click.echo(format_token(token))

        if collector is not None and collector.has_errors():
            click.echo(collector.report(), err=True)
            sys.exit(ExitCode.SCAN_ERROR)

        if verbose:
            click.echo(f"Scanned {len(tokens)} tokens", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
