"""Escape-aware argument splitting.

Splits an argument region on a literal separator. A separator directly
preceded by a backslash does not split, so "hello\\, world" stays a single
argument. Escape markers are left in place.
"""

import re
from typing import List

from cmdparser.parsing.models import SeparatorConfigurationError

DEFAULT_SEPARATOR = ","
ESCAPE_MARKER = "\\"


def _compile_separator(separator: str) -> re.Pattern:
    """Build a pattern matching separator when not preceded by the escape marker."""
    return re.compile(f"(?<!{re.escape(ESCAPE_MARKER)}){re.escape(separator)}")


def split(text: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """Split text into raw arguments on unescaped separators.

    Args:
        text: The argument region of a command line.
        separator: Literal character sequence delimiting arguments.

    Returns:
        Raw argument substrings in order. Always at least one element.

    Raises:
        SeparatorConfigurationError: If separator is empty.

    Example:
        >>> split("a\\\\,b,c")
        ['a\\\\,b', 'c']
        >>> split("a,b,")
        ['a', 'b', '']
    """
    if not separator:
        raise SeparatorConfigurationError("`separator` can't be an empty string")

    pattern = _compile_separator(separator)
    args: List[str] = []

    remaining = text
    while True:
        # Lookbehind only sees the remaining text, so a match at its start always counts
        match = pattern.search(remaining)
        if match is None:
            args.append(remaining)
            break

        args.append(remaining[: match.start()])
        remaining = remaining[match.end() :]

    return args
