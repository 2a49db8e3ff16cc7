"""Command line tokenizer.

Turns a line such as "stream add youtube, UC123" into a command ("stream"),
a subcommand ("add") and arguments (["youtube", "UC123"]).

Only the spaces between command, subcommand and argument region are
structural. The argument region is taken verbatim from the original line,
so whitespace inside it survives exactly as typed.
"""

from typing import Optional, Tuple

from cmdparser.logging import get_module_logger
from cmdparser.parsing.arguments import build
from cmdparser.parsing.models import ParseResult, SeparatorConfigurationError
from cmdparser.parsing.scanner import DEFAULT_SEPARATOR, split
from cmdparser.services.providers import get_settings

logger = get_module_logger(__name__)

TOKEN_DELIMITER = " "


def _split_head(line: str) -> Tuple[str, Optional[str], Optional[str]]:
    """Split line into command, subcommand and the verbatim argument region."""
    command, delimiter, rest = line.partition(TOKEN_DELIMITER)
    rest = rest.lstrip(TOKEN_DELIMITER)
    if not delimiter or not rest:
        return command, None, None

    sub_command, delimiter, rest = rest.partition(TOKEN_DELIMITER)
    if not delimiter:
        return command, sub_command, None

    return command, sub_command, rest.lstrip(TOKEN_DELIMITER)


def parse(line: str, separator: str = DEFAULT_SEPARATOR) -> ParseResult:
    """Parse a command line into command, subcommand and arguments.

    Args:
        line: The raw command line.
        separator: Literal character sequence delimiting arguments.

    Returns:
        ParseResult. sub_command is None without a second token and args is
        None without an argument region.

    Raises:
        SeparatorConfigurationError: If separator is empty and the line has
            an argument region to split.

    Example:
        >>> result = parse("echo sub a,b,c")
        >>> result.command, result.sub_command, result.args.only("value")
        ('echo', 'sub', ['a', 'b', 'c'])
    """
    command, sub_command, region = _split_head(line)

    args = None
    if region is not None:
        args = build(split(region, separator))

    return ParseResult(command=command, sub_command=sub_command, args=args)


class CommandLineParser:
    """Parser bound to an argument separator.

    Stateless apart from the separator, so a single instance can be shared.

    Example:
        parser = CommandLineParser(separator=";")
        result = parser.parse("remind add 10m; stretch, then water")
        # result.args.only("value") == ["10m", "stretch, then water"]
    """

    def __init__(self, separator: Optional[str] = None):
        """Initialize parser.

        Args:
            separator: Argument separator. Defaults to the configured
                COMMAND_ARGUMENT_SEPARATOR.

        Raises:
            SeparatorConfigurationError: If separator is an empty string.
        """
        if separator is None:
            separator = get_settings().parser.separator
        if not separator:
            raise SeparatorConfigurationError("`separator` can't be an empty string")
        self.separator = separator

    def parse(self, line: str) -> ParseResult:
        """Parse a command line with this parser's separator."""
        result = parse(line, self.separator)
        logger.debug(
            "command_line_parsed",
            command=result.command,
            sub_command=result.sub_command,
            argument_count=len(result.args) if result.args is not None else 0,
        )
        return result
