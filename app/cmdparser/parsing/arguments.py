"""Argument list building."""

from typing import FrozenSet, Iterable

from cmdparser.parsing.models import Argument, ArgumentList

INVISIBLE_CHARS: FrozenSet[str] = frozenset(
    {
        "\u00ad",  # soft hyphen
        "\u180e",  # mongolian vowel separator
        "\u200b",  # zero width space
        "\u200c",  # zero width non-joiner
        "\u200d",  # zero width joiner
        "\u2060",  # word joiner
        "\ufeff",  # zero width no-break space
    }
)

_INVISIBLE_TABLE = {ord(char): None for char in INVISIBLE_CHARS}


def strip_invisible_chars(text: str) -> str:
    """Remove zero-width and other invisible characters from text."""
    return text.translate(_INVISIBLE_TABLE)


def build(raw_args: Iterable[str]) -> ArgumentList:
    """Build an ArgumentList from raw argument substrings.

    Each value is the raw substring without invisible characters, trimmed of
    surrounding whitespace. Raw substrings are kept untouched.
    """
    return ArgumentList(
        tuple(
            Argument(raw=raw, value=strip_invisible_chars(raw).strip())
            for raw in raw_args
        )
    )
