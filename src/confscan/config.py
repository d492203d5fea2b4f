"""
confscan - Configuration
========================

Settings shared by the command-line tool. Configuration can come from:
- Default values (defined here)
- Environment variables (ScanConfig.from_env)
- Command-line flags, which override both

Copyright (c) 2026 confscan Contributors
"""

from dataclasses import dataclass
from typing import Optional
import os


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")


@dataclass
class ScanConfig:
    """
    Settings for a scanning run.

    Attributes:
        encoding: Text encoding used to read input files (default: utf-8)
        max_errors: Errors to collect before giving up in keep-going mode
        keep_going: Skip to the next line after an error instead of stopping
        log_level: Logging level name for the package loggers
        output_format: How tokens are printed, "text" or "json"
    """

    encoding: str = "utf-8"
    max_errors: int = 100
    keep_going: bool = False
    log_level: str = "WARNING"
    output_format: str = "text"

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """
        Create a ScanConfig from environment variables.

        Environment variables (all optional):
            CONFSCAN_ENCODING: Input encoding (e.g. "latin-1")
            CONFSCAN_MAX_ERRORS: Error limit (positive integer)
            CONFSCAN_KEEP_GOING: "1", "true" or "yes" to enable
            CONFSCAN_LOG_LEVEL: Logging level name
            CONFSCAN_FORMAT: "text" or "json"

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if encoding := os.environ.get("CONFSCAN_ENCODING"):
            config.encoding = encoding

        if max_errors := os.environ.get("CONFSCAN_MAX_ERRORS"):
            try:
                value = int(max_errors)
            except ValueError:
                value = 0
            if value > 0:
                config.max_errors = value

        if keep_going := os.environ.get("CONFSCAN_KEEP_GOING"):
            config.keep_going = keep_going.strip().lower() in ("1", "true", "yes")

        if log_level := os.environ.get("CONFSCAN_LOG_LEVEL"):
            if log_level.upper() in LOG_LEVELS:
                config.log_level = log_level.upper()

        if output_format := os.environ.get("CONFSCAN_FORMAT"):
            if output_format.lower() in OUTPUT_FORMATS:
                config.output_format = output_format.lower()

        return config


# Process-wide default configuration (can be overridden in tests)
_default_config: Optional[ScanConfig] = None


def get_default_config() -> ScanConfig:
    """
    Get the default configuration.

    Created from environment variables on first access. Can be
    overridden by calling set_default_config().
    """
    global _default_config
    if _default_config is None:
        _default_config = ScanConfig.from_env()
    return _default_config


def set_default_config(config: Optional[ScanConfig]) -> None:
    """
    Set the default configuration.

    Passing None makes the next get_default_config() call read the
    environment again.
    """
    global _default_config
    _default_config = config
