"""Command-line option helpers shared by the markdown tools."""

from __future__ import annotations

import re
from typing import Callable, Optional, Sequence

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


class OptionError(Exception):
    """Raised by option handlers for options that cannot be accepted."""


def parse_int(text: str) -> Optional[int]:
    """Parse a whole string as a signed decimal integer; None when it is not one."""
    if text == "":
        return 0  # an empty string converts to zero with nothing left over
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text.lstrip(" \t\n\v\f\r"))
    if not _LONG_MIN <= value <= _LONG_MAX:
        return None
    return value


def strip_prefix(text: str, prefix: str) -> Optional[str]:
    """Return text without prefix, or None when text does not start with it."""
    if text.startswith(prefix):
        return text[len(prefix):]
    return None


def format_option(short_opt: Optional[str], long_opt: str, description: str) -> str:
    """Format one line of option help, without a trailing newline."""
    lead = f"  -{short_opt}, " if short_opt else "      "
    return f"{lead}--{long_opt:<13s}  {description}"


ShortHandler = Callable[[str, Optional[str]], int]
LongHandler = Callable[[str, Optional[str]], int]
ArgumentHandler = Callable[[int, str, bool], int]


def parse_options(
    argv: Sequence[str],
    short_option: ShortHandler,
    long_option: LongHandler,
    argument: ArgumentHandler,
) -> bool:
    """Walk argv (without the program name), handing options and arguments to handlers.

    Option handlers get the option and the text that may serve as its value, and
    return 1 if only the option was used or 2 if the value was consumed as well.
    The argument handler gets the argument's position, the argument, and whether
    it follows "--". A handler returning 0 stops parsing and makes this return False.
    """
    argv = list(argv)
    position = 0
    regular = 0

    while position < len(argv):
        arg = argv[position]
        if len(arg) > 1 and arg[0] == "-":
            next_arg = argv[position + 1] if position + 1 < len(argv) else None
            if arg == "--":
                position += 1
                break
            if arg[1] == "-":
                result = long_option(arg[2:], next_arg)
                if not result:
                    return False
                position += result
            else:
                for index in range(1, len(arg)):
                    rest = arg[index + 1:]
                    value = rest if rest else next_arg
                    result = short_option(arg[index], value)
                    if not result:
                        return False
                    if result == 2:
                        if not rest:
                            position += 1
                        break
                position += 1
        else:
            if not argument(regular, arg, False):
                return False
            regular += 1
            position += 1

    for arg in argv[position:]:
        if not argument(regular, arg, True):
            return False
        regular += 1

    return True