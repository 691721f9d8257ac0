# barestdio

A small, dependency-free library that behaves like the minimal C runtime
found in freestanding firmware. Use it to reproduce exactly what such code
prints or parses, padding rules and parsing quirks included.

## Modules

- `barestdio.ctype`: character classification over a fixed 256-entry
  Latin-1 table: `isalnum`, `isalpha`, `iscntrl`, `isdigit`, `isgraph`,
  `islower`, `isprint`, `ispunct`, `isspace`, `isupper`, `isxdigit`,
  `isascii`, plus `toascii`, `tolower` and `toupper`. Each one takes an
  integer code (taken modulo 256) or a one-character string. The conversion
  functions give back the same kind of value they were given. The table bits
  are available as the `CharClass` flag enum.
- `barestdio.div64`: `div64_32(n, base)` and `do_div(n, base)` divide a
  64-bit unsigned value by a 32-bit divisor and return `(quotient, remainder)`.
  `div64_32` raises `ValueError` for values out of range. `do_div` wraps its
  arguments to 64 and 32 bits instead. Both raise `ZeroDivisionError` for a
  zero divisor. `muldi3(u, v)` multiplies and wraps the result to a signed
  64-bit value.
- `barestdio.strops`: the classic string and memory routines for Python
  values. Strings end at their first `"\0"`. Functions that find a position
  return an index, or `None` when nothing is found:
  - comparison: `strcmp`, `strncmp`, `strnicmp`;
  - copying and appending: `strncpy`, `strncat`;
  - searching: `strchr`, `strrchr`, `strstr`, `strpbrk`, `strspn`;
  - length: `strlen`, `strnlen`;
  - splitting: `strtok` is a generator of the non-empty tokens. `strsep`
    returns `(token, rest)` and keeps empty tokens.
  - memory: `memset`, `memcpy`, `memmove` (offsets within one buffer, with
    overlap handled), `memcmp`, `memscan` and `memchr`. They work on
    bytes-like objects and change `bytearray` buffers in place.
- `barestdio.formatting`: `sprintf`, `vsprintf`, `snprintf`, `vsnprintf`,
  `scnprintf` and `vscnprintf`.
  - Conversions: `%c %s %p %n %% %d %i %u %o %x %X`.
  - Flags: `- + space # 0`.
  - Width and precision, either of which may be `*`.
  - Length qualifiers: `h l ll L z Z`.
  - The sized variants return `(text, length)`. `text` fits a buffer of
    `size` characters, with the terminator counted in the size. `length` is
    the full output length for `snprintf`, and the stored length for
    `scnprintf`.
- `barestdio.scanning`: `sscanf` and `vsscanf` return the parsed values as a
  list, in format order. Conversions: `%c %s %n %% %d %i %u %o %x %X` and
  `%*`. Length qualifiers: `hh h l ll L z Z`. The `simple_strtoul`,
  `simple_strtol`, `simple_strtoull` and `simple_strtoll` parsers return
  `(value, end)`. With base 0 they detect `0` and `0x` prefixes.
- `barestdio.console`: `Console(write=None, read=None)` sends formatted output
  one character at a time through `write` and reads input one character at a
  time through `read`. By default it uses standard output and standard input.
  `Console.printf` formats and sends text. `Console.scanf` reads one line,
  echoes it, and parses it. The module-level `printf` and `scanf` use a
  console on standard output and input.

## Usage

```python
from barestdio.formatting import sprintf, snprintf
from barestdio.scanning import sscanf, simple_strtoul
from barestdio.strops import strcmp
from barestdio.div64 import do_div

sprintf("%#06x|%-5d|%s", 255, 42, "ok")   # '0x00ff|42   |ok'
sprintf("%x", 255)                        # 'FF'
snprintf(4, "%d", 123456)                 # ('123', 6)
sscanf("12 0x1f abc", "%d %x %s")         # [12, 31, 'abc']
simple_strtoul("0x1fzz", 0)               # (31, 4)
strcmp("abc", "abd")                      # -1
do_div(10**12, 7)                         # (142857142857, 1)
```

A console over your own character device:

```python
import io
from barestdio.console import Console

sent = []
incoming = io.StringIO("42 7\n")
console = Console(write=sent.append, read=lambda: incoming.read(1))
console.scanf("%d %d")        # [42, 7]; the line is echoed into `sent`
console.printf("n=%d\r\n", 5) # returns 5
```

## Behaviour worth knowing

- Hexadecimal digits are upper case unless the `#` flag is given. `#`
  selects lower-case digits and a `0x` prefix, and it does so for `%X` as
  well.
- `%p` prints eight zero-padded hexadecimal digits by default.
- `%s` with `None` prints `<NULL>`.
- `%n` takes a callable, which is called with the number of characters
  produced so far.
- Integer arguments are wrapped to the C type that the qualifier names:
  16 bits for `h`, 64 bits for `ll` and `L`, and 32 bits otherwise.
- An unknown conversion is copied to the output as written.
- `sscanf` stops at the first literal or conversion that does not match, and
  returns what it has parsed up to that point. `%n` values appear in the
  result list like any other conversion.
- Missing or mistyped formatting arguments raise `TypeError`. A negative
  buffer size raises `ValueError`.
- `Console.getc` raises `EOFError` when input runs out.

## What it does not do

There are no floating-point conversions (`%f`, `%e`, `%g`). No conversion
writes to memory addresses. The console talks only to the character
callables it is given, or to standard input and output. It has no serial or
UART driver of its own.

## Running the tests

```
pip install -e .[test]
pytest
```