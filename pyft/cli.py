"""Command-line driver that runs printf side by side with the standard formatter."""

from __future__ import annotations

import re
import struct
import sys
from collections.abc import Callable, Sequence
from typing import Any, TextIO

from pyft.printf import FormatError, printf

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1

_UINT_MASK = 0xFFFFFFFF
_CONVERSION = re.compile(r"%(.)", re.DOTALL)
_USAGE = "flag not found, valids flags are --b, --t, --g, --a\n"


def _as_int32(value: int) -> int:
    return struct.unpack("<i", struct.pack("<I", value & _UINT_MASK))[0]


def _reference(fmt: str, *args: Any) -> str:
    """Render fmt with Python's own % formatting, coercing values like C varargs."""
    values = iter(args)

    def render(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        arg = next(values)
        if spec == "c":
            return "%c" % (arg if isinstance(arg, str) else arg & 0xFF)
        if spec == "s":
            return "%s" % ("(null)" if arg is None else arg)
        if spec == "p":
            if arg is None:
                return "(nil)"
            address = arg if isinstance(arg, int) else id(arg)
            return "(nil)" if address == 0 else "%#x" % address
        if spec in "di":
            return "%d" % _as_int32(arg)
        if spec == "u":
            return "%d" % (arg & _UINT_MASK)
        if spec == "x":
            return "%x" % (arg & _UINT_MASK)
        if spec == "X":
            return "%X" % (arg & _UINT_MASK)
        raise ValueError(f"unsupported conversion '%{spec}'")

    return _CONVERSION.sub(render, fmt)


def _std(out: TextIO, fmt: str, *args: Any) -> int:
    text = _reference(fmt, *args)
    out.write(text)
    return len(text)


def _ft(out: TextIO, fmt: str | None, *args: Any) -> int:
    try:
        return printf(fmt, *args, file=out)
    except FormatError as err:
        out.write(err.report)
        return -1


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def run_basic(file: TextIO | None = None) -> None:
    """Print every conversion once, then the edge and invalid-format cases."""
    out = _target(file)
    _ft(out, None)
    n = [42]
    text = "hello"
    _ft(out, "---- BASIC TESTS ----\n")
    _ft(out, "char      : %c\n", "A")
    _ft(out, "string    : %s\n", text)
    _ft(out, "signed d  : %d\n", 42)
    _ft(out, "signed i  : %i\n", -42)
    _ft(out, "unsigned  : %u\n", 42)
    _ft(out, "lower hex : %x\n", 255)
    _ft(out, "upper hex : %X\n", 255)
    _ft(out, "pointer   : %p\n", n)
    _ft(out, "percent   : %%\n")
    _ft(out, "\n---- EDGE TESTS ----\n")
    _ft(out, "zero d    : %d\n", 0)
    _ft(out, "zero x    : %x\n", 0)
    _ft(out, "big hex   : %x\n", 2147483647)
    _ft(out, "unsigned  : %u\n", 4294967295)
    _ft(out, "NULL str  : %s\n", None)
    _ft(out, "NULL ptr  : %p\n", None)
    _ft(out, "\n---- INVALID FORMAT TESTS ----\n")
    _ft(out, "invalid   : %g\n")
    _ft(out, "eol       : %\n")
    _ft(out, "eos       : %")


def _tha_pair(out: TextIO, body: str, *args: Any) -> None:
    size_o = _std(out, "O: " + body, *args)
    size_m = _ft(out, "M: " + body, *args)
    _std(out, "Retorno O: %d, Retorno M: %d\n\n", size_o, size_m)


def run_tha(file: TextIO | None = None) -> None:
    """Compare one long mixed format and a series of single cases."""
    out = _target(file)
    c = "l"
    text = "Teste"
    text2 = None
    pointer = text
    d = -42
    i = 123
    hex_value = 255
    hex_zero = 0
    u = -42
    un = 0
    tes = 43
    mixed = (
        "char: %c, string: %s, ponteiro: %p, decimal: %d, inteiro: %i, "
        "unsigned: %u, hex: %x, HEX: %X, porcento: %%\n"
    )
    mixed_args = (c, text, pointer, d, i, u, hex_value, hex_value)

    _std(out, "=== Original printf ===\n")
    size_o = _std(out, mixed, *mixed_args)
    _std(out, "Retorno printf: %d\n\n", size_o)

    _std(out, "=== Minha ft_printf ===\n")
    size_m = _ft(out, mixed, *mixed_args)
    _std(out, "Retorno ft_printf: %d\n\n", size_m)

    _std(out, "\n==== TESTES ft_printf vs printf ====\n\n")

    _std(out, "1. UNSIGNED\n")
    _tha_pair(out, "|%u|\n", u)

    _std(out, "2. PONTEIROS\n")
    _tha_pair(out, "|%p|\n", pointer)

    _std(out, "3. CHARS e STRINGS\n")
    _tha_pair(out, "|%c| |%s|\n", c, text)
    _tha_pair(out, "|%s|\n", text2)

    _std(out, "4. PORCENTO\n")
    _tha_pair(out, "|%%|\n")

    _std(out, "5. VALORES EXTREMOS\n")
    _tha_pair(out, "|%d| |%d|\n", INT_MIN, INT_MAX)

    _std(out, "x = 0\n")
    _tha_pair(out, "|%x| |%x| |%x|\n", hex_zero, hex_zero, hex_zero)

    _std(out, "X = 0\n")
    _tha_pair(out, "|%X| |%X| |%X|\n", hex_zero, hex_zero, hex_zero)

    _tha_pair(out, "|%u| |%u| |%u| |%u|\n", tes, un, 1024, -1024)


def run_ga(file: TextIO | None = None) -> None:
    """Print each conversion in brackets with both return values."""
    out = _target(file)
    c = "g"
    text = "dell"
    pointer = c
    num = 6010
    unbr = -6010
    cases: list[tuple[str | None, str, tuple[Any, ...]]] = [
        ("\n---string---\n", "[%s]\t", (text,)),
        ("\n---pointer---\n", "[%p]\t", (pointer,)),
        (None, "[%p]\t", (None,)),
        ("\n---decimal---\n", "[%d]\t", (num,)),
        ("\n---unsigned---\n", "[%u]\t", (unbr,)),
        ("\n---hexadecimals---\n", "[%X][%x]\t", (num, num)),
        ("\n---hexadecimal lower---\n", "[%x]\t", (num,)),
        ("\n---hexadecimal upper---\n", "[%X]\t", (num,)),
        ("\n---percent---\n", "[%%]\t", ()),
    ]
    for title, body, args in cases:
        if title is not None:
            _std(out, title)
        mine = _ft(out, body, *args)
        _std(out, "my: %d\n", mine)
        original = _std(out, body, *args)
        _std(out, "or: %d\n", original)


def _adv_pair(out: TextIO, body: str, *args: Any) -> None:
    size_o = _std(out, "printf: " + body, *args)
    size_m = _ft(out, "ft_printf: " + body, *args) - 3
    _std(out, "printf returned: %d, ft_printf returned: %d\n\n", size_o, size_m)


def _adv_section(out: TextIO, header: str, bodies: Sequence[str], values: Sequence[Any]) -> None:
    _std(out, header + "\n")
    for body, value in zip(bodies, values):
        _adv_pair(out, body, value)


def _adv_errors(out: TextIO) -> None:
    _std(out, "ERRORS\n")
    _std(out, "ft_printf(NULL): ")
    _ft(out, None)
    _std(out, "done\n\n")
    _std(out, "invalid specifier (%%g): ")
    _ft(out, "%g\n")
    _std(out, "eol (%%\\n): ")
    _ft(out, "%\n")
    _std(out, "eos (%%): ")
    _ft(out, "%")
    _std(out, "\ndone\n\n")


def _adv_edges(out: TextIO) -> None:
    _std(out, "EDGES\n")
    _adv_pair(out, "|%d| |%d|\n", INT_MIN, INT_MAX)
    _adv_pair(out, "|%u|\n", UINT_MAX)
    _adv_pair(out, "|%s| |%p|\n", None, None)


def run_adv(file: TextIO | None = None) -> None:
    """Run the grouped comparisons, the error cases and the edge values."""
    out = _target(file)
    text = "Teste"
    text2 = "dell"
    text3 = None
    pointer = text
    _adv_section(out, "CHARS", ["|%c|\n"] * 3, ["l", "A", "\0"])
    _adv_section(out, "STRINGS", ["|%s|\n"] * 3, [text, text2, text3])
    _adv_section(out, "INTS", ["|%d|\n", "|%d|\n", "|%i|\n"], [-42, 123, 42])
    _adv_section(out, "UNSIGNED", ["|%u|\n"] * 3, [-42, 0, 43])
    _adv_section(out, "POINTERS", ["|%p|\n"] * 2, [pointer, None])
    _adv_section(out, "LOWER HEX", ["|%x|\n"] * 3, [255, 0, 2147483647])
    _adv_section(out, "UPPER HEX", ["|%X|\n"] * 3, [255, 0, 2147483647])
    _std(out, "PERCENTS\n")
    _adv_pair(out, "|%%|\n")
    _adv_errors(out)
    _adv_edges(out)


_RUNNERS: dict[str, Callable[[TextIO | None], None]] = {
    "--b": run_basic,
    "--t": run_tha,
    "--g": run_ga,
    "--a": run_adv,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the suite chosen by the first argument; the basic one by default."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if not args:
        run_basic(out)
        return 0
    runner = _RUNNERS.get(args[0])
    if runner is None:
        out.write(_USAGE)
        return 0
    runner(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())