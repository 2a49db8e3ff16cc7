"""Chat command line parser.

Example:
    from cmdparser import parse

    result = parse("stream add youtube, UC123")
    result.command               # "stream"
    result.sub_command           # "add"
    result.args.only("value")    # ["youtube", "UC123"]
"""

from cmdparser.parsing import (
    DEFAULT_SEPARATOR,
    Argument,
    ArgumentList,
    ArgumentView,
    CommandLineParser,
    ParseResult,
    SeparatorConfigurationError,
    build,
    parse,
    split,
    strip_invisible_chars,
)

__all__ = [
    "DEFAULT_SEPARATOR",
    "Argument",
    "ArgumentList",
    "ArgumentView",
    "CommandLineParser",
    "ParseResult",
    "SeparatorConfigurationError",
    "build",
    "parse",
    "split",
    "strip_invisible_chars",
]
