"""A small printf: %c %s %p %d %i %u %x %X and %%, with strict format checking."""

from __future__ import annotations

import operator
import re
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from pyft.strings import itoa, to_base, uitoa

_DEFAULT = "\033[0m"
_RED = "\033[1;31m"
_GREEN = "\033[1;32m"

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF

_SPECIFIERS = frozenset("cspdiuxX%")
_CONVERSION = re.compile(r"%(.?)", re.DOTALL)


class FormatError(ValueError):
    """A format string that cannot be used.

    ``report`` holds the full diagnostic text, colour codes included.
    ``position`` and ``specifier`` locate an unknown conversion when there is one.
    """

    def __init__(
        self,
        message: str,
        report: str,
        position: int | None = None,
        specifier: str | None = None,
    ) -> None:
        super().__init__(message)
        self.report = report
        self.position = position
        self.specifier = specifier


def _null_format() -> FormatError:
    return FormatError(
        "null string is not accepted",
        f"{_RED}error: {_DEFAULT}null string is not accepted!\n",
    )


def _trailing_percent(next_char: str) -> FormatError:
    if next_char == "\n":
        text = "'%' right before line feed (\\n), change to '%%'!\n"
    else:
        text = "'%' right before a null terminator, change to '%%'!\n"
    return FormatError(text.rstrip("\n"), f"{_RED}Error: {_DEFAULT}{text}")


def _invalid_specifier(fstr: str, spec: str, position: int) -> FormatError:
    report = "".join(
        (
            f"{_RED}error: {_DEFAULT}invalid argument type: '%{spec}'\n",
            fstr[:-1],
            "\n",
            " " * max(position - 1, 0),
            f"{_GREEN}~^\n",
            f"{_RED}'%{spec}' is not a valid argument type!\n{_DEFAULT}",
        )
    )
    return FormatError(
        f"invalid argument type '%{spec}' at index {position}",
        report,
        position=position,
        specifier=spec,
    )


def validate(fstr: str | None) -> tuple[str, ...]:
    """Check a format string and return its conversion characters in order.

    Raises FormatError for a missing format, a '%' at the end of the string
    or before a line feed, and for any unknown conversion character.
    """
    if fstr is None:
        raise _null_format()
    specs = []
    for match in _CONVERSION.finditer(fstr):
        spec = match.group(1)
        if spec in ("", "\0", "\n"):
            raise _trailing_percent(spec)
        if spec not in _SPECIFIERS:
            raise _invalid_specifier(fstr, spec, match.start(1))
        specs.append(spec)
    return tuple(specs)


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c requires a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _pointer(arg: Any) -> str:
    if arg is None:
        return "(nil)"
    address = operator.index(arg) if isinstance(arg, int) else id(arg)
    if address == 0:
        return "(nil)"
    return "0x" + to_base(address, _LOWER_HEX)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec in "di":
        return itoa(operator.index(arg))
    if spec == "u":
        return uitoa(operator.index(arg))
    if spec == "c":
        return _char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        return _pointer(arg)
    digits = _LOWER_HEX if spec == "x" else _UPPER_HEX
    return to_base(operator.index(arg) & _UINT_MASK, digits)


def format_string(fstr: str | None, *args: Any) -> str:
    """Render a format string with its arguments and return the text."""
    validate(fstr)
    assert fstr is not None
    remaining = iter(args)
    pieces = []
    last = 0
    for match in _CONVERSION.finditer(fstr):
        pieces.append(fstr[last:match.start()])
        pieces.append(_convert(match.group(1), remaining))
        last = match.end()
    pieces.append(fstr[last:])
    return "".join(pieces)


def printf(fstr: str | None, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered format string and return the number of characters written."""
    text = format_string(fstr, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)