"""Character classification, number conversion and string helpers."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_INT_BITS = 32
_LONG_BITS = 64
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a value in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def _wrap_signed(number: int, bits: int) -> int:
    mask = (1 << bits) - 1
    number &= mask
    if number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def itoa(number: int) -> str:
    """Decimal text of a number taken as a 32-bit signed integer."""
    return str(_wrap_signed(int(number), _INT_BITS))


def uitoa(number: int) -> str:
    """Decimal text of a number taken as a 32-bit unsigned integer."""
    return str(int(number) & ((1 << _INT_BITS) - 1))


def to_base(number: int, digits: str) -> str:
    """Write a number, taken as 64-bit unsigned, using the given digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a digit alphabet needs at least two characters")
    value = int(number) & ((1 << _LONG_BITS) - 1)
    out: list[str] = []
    while True:
        value, rem = divmod(value, base)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character found in chars."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text from start onwards."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Index of needle lying wholly within the first limit characters, or None."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; the result's sign orders a against b."""
    if n < 0:
        raise ValueError("n must not be negative")
    for ca, cb in islice(zip_longest(a, b, fillvalue="\0"), n):
        diff = ord(ca) - ord(cb)
        if diff or ca == "\0":
            return diff
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))