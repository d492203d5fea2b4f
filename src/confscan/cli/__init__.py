"""
confscan Command-Line Interface
===============================

This package provides the command-line tool for confscan:

- **cscan**: print the tokens of a configuration file

The tool is a Click-based CLI application with built-in help and
error reporting.
"""

__all__ = ["cscan"]
