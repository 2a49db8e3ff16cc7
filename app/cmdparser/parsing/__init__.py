"""Command line parsing.

Splits a single line of text into a command, an optional subcommand and an
ordered list of separator-delimited arguments.
"""

from cmdparser.parsing.arguments import (
    INVISIBLE_CHARS,
    build,
    strip_invisible_chars,
)
from cmdparser.parsing.models import (
    Argument,
    ArgumentList,
    ArgumentView,
    ParseResult,
    SeparatorConfigurationError,
)
from cmdparser.parsing.scanner import DEFAULT_SEPARATOR, ESCAPE_MARKER, split
from cmdparser.parsing.tokenizer import CommandLineParser, parse

__all__ = [
    "Argument",
    "ArgumentList",
    "ArgumentView",
    "ParseResult",
    "SeparatorConfigurationError",
    "DEFAULT_SEPARATOR",
    "ESCAPE_MARKER",
    "INVISIBLE_CHARS",
    "split",
    "build",
    "strip_invisible_chars",
    "parse",
    "CommandLineParser",
]
