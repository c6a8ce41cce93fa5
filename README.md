# pyft

A compact `printf` that understands a fixed set of conversions and rejects
anything else, together with a handful of string helpers in the same spirit.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Formatting

The `pyft.printf` module provides `printf`, `format_string`, `validate` and
`FormatError`.

```python
from pyft.printf import printf, format_string, validate, FormatError

count = printf("%s has %d items (%x)\n", "cart", 42, 42)
# writes "cart has 42 items (2a)" to standard output and returns 23

text = format_string("[%p] %u %%", 0xDEAD, -1)
# "[0xdead] 4294967295 %"

validate("%d and %s")   # ("d", "s")
```

`printf(fstr, *args, file=None)` writes to `file`, or to standard output when
none is given, and returns the number of characters written.
`format_string(fstr, *args)` returns the rendered text instead of writing it.

Supported conversions:

| Spec      | Meaning                                                        |
|-----------|----------------------------------------------------------------|
| `%c`      | a one-character string, or an int taken by its low byte        |
| `%s`      | `str()` of the argument; `None` prints `(null)`                |
| `%d` `%i` | an integer wrapped to signed 32 bits                           |
| `%u`      | an integer wrapped to unsigned 32 bits                         |
| `%x` `%X` | unsigned 32-bit hexadecimal, lower / upper case                |
| `%p`      | `0x` and lower-case hex of an int, or of `id()` of any other object; `None` or 0 prints `(nil)` |
| `%%`      | a literal percent sign                                         |

There are no flags, widths or precisions. Arguments beyond those the format
uses are ignored; too few raise `TypeError`.

### Rejected formats

`validate(fstr)` returns the conversion characters in order, and raises
`FormatError` (a `ValueError`) when the format is `None`, ends in a lone `%`,
has `%` directly before a newline or a NUL character, or uses an unknown
conversion. `format_string` and `printf` validate first, so they raise the same
error before anything is written.

A `FormatError` carries:

- `report`: the full diagnostic as terminal text with ANSI colours; for an
  unknown conversion it repeats the format line and marks the offending spot
  with `~^`;
- `position` and `specifier`: the index and character of an unknown
  conversion, otherwise `None`.

```python
try:
    printf("value: %g\n", 1.5)
except FormatError as err:
    print(err.specifier, err.position)   # g 8
```

## String helpers

`pyft.strings` offers:

- character tests `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`
  and case changes `to_upper`, `to_lower`, all ASCII-only; each takes a
  one-character string or an int code, and the case changes give back the
  same kind they were given;
- `atoi(text)`: a leading decimal integer after optional whitespace and one
  sign, `0` when there is none;
- `itoa(number)` / `uitoa(number)`: decimal text of a number wrapped to signed
  / unsigned 32 bits;
- `to_base(number, digits)`: the number, wrapped to unsigned 64 bits, written
  with the given digit alphabet (at least two characters);
- `split(text, sep)`: split on one character, dropping empty pieces;
- `strtrim(text, chars)`: strip any of `chars` from both ends;
- `substr(text, start, length)`: at most `length` characters from `start`;
- `strnstr(haystack, needle, limit)`: index of `needle` lying wholly within the
  first `limit` characters, or `None`; an empty needle gives `0`;
- `strncmp(a, b, n)`: compare at most `n` characters, returning the difference
  of the first pair that differs;
- `strmapi(text, func)`: a new string of `func(index, char)` for each character.

```python
from pyft.strings import atoi, split, to_base

atoi("   -42abc")                 # -42
split("  a b  c ", " ")           # ["a", "b", "c"]
to_base(255, "0123456789abcdef")  # "ff"
```

## Demo command

`pyft-demo` (the function `pyft.cli.main`) runs a fixed set of calls, printing
each case through `printf` and, in most runs, through Python's own `%`
formatting for comparison, with the character counts each returned. Rejected
formats print their diagnostic report and count as `-1`.

```
pyft-demo          # basic run
pyft-demo --b      # basic run
pyft-demo --t      # mixed conversions side by side
pyft-demo --g      # one conversion at a time with returned counts
pyft-demo --a      # extended run including error cases
```

Any other first argument prints the list of valid flags. The runs are also
available as `run_basic`, `run_tha`, `run_ga` and `run_adv` in `pyft.cli`,
each taking an optional text stream to write to.