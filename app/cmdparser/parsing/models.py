"""Parse result models for command lines.

Provides:
- Argument: A single scanned argument (raw and cleaned views)
- ArgumentView: Enum of the views exposed by ArgumentList.only()
- ArgumentList: Immutable ordered sequence of arguments
- ParseResult: Command, optional subcommand and optional arguments
- SeparatorConfigurationError: Raised when the separator is unusable
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union


class ArgumentView(str, Enum):
    """Views over an argument list."""

    RAW = "raw"
    VALUE = "value"


@dataclass(frozen=True)
class Argument:
    """A single command argument.

    Attributes:
        raw: The substring exactly as scanned, escape markers and whitespace intact.
        value: The raw substring with invisible characters removed and whitespace trimmed.
    """

    raw: str
    value: str


@dataclass(frozen=True)
class ArgumentList:
    """Immutable ordered sequence of arguments, in order of appearance.

    Example:
        >>> args = ArgumentList((Argument("a", "a"), Argument(" ", "")))
        >>> args.only("raw")
        ['a', ' ']
        >>> args.only("value")
        ['a']
    """

    arguments: Tuple[Argument, ...] = ()

    def __post_init__(self):
        # Copy whatever sequence was passed so callers keep no handle on storage
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def only(self, kind: Union[ArgumentView, str]) -> List[str]:
        """Return a new list holding one view of every argument.

        Args:
            kind: "raw" for every raw string (empty ones included) or
                "value" for every cleaned value that is not empty.

        Returns:
            A fresh list; mutating it never affects this ArgumentList.

        Raises:
            ValueError: If kind is not a known view.
        """
        view = ArgumentView(kind)
        if view is ArgumentView.RAW:
            return [arg.raw for arg in self.arguments]
        return [arg.value for arg in self.arguments if arg.value]

    def __len__(self) -> int:
        return len(self.arguments)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self.arguments)

    def __getitem__(self, index: int) -> Argument:
        return self.arguments[index]


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a command line.

    Attributes:
        command: First space-delimited token. Empty string for an empty line.
        sub_command: Second space-delimited token, None when absent.
        args: Arguments from the argument region, None when there is no region.
    """

    command: str
    sub_command: Optional[str] = None
    args: Optional[ArgumentList] = None


class SeparatorConfigurationError(ValueError):
    """Raised when an argument separator can't be used for splitting."""

    pass
