"""printf-style formatting into a bounded buffer.

The conversions are ``%c %s %p %n %% %d %i %u %o %x %X`` with the flags
``- + space # 0``, a field width and precision (either may be ``*``) and the
length qualifiers ``h l ll L z Z``.  Integer arguments are wrapped to the C
type the qualifier names: 16 bits for ``h``, 64 bits for ``ll``/``L`` and
32 bits otherwise.

Two quirks of this formatter are kept: hexadecimal digits are upper case
unless the ``#`` flag is given (which selects lower case and the ``0x``
prefix, for ``%X`` as well), and ``%p`` is eight zero-padded digits by
default.  ``%n`` takes a callable, which is called with the number of
characters produced so far.  ``None`` prints as ``<NULL>`` for ``%s``.
"""

import re
from collections.abc import Callable, Iterable, Iterator
from enum import IntFlag

__all__ = [
    "vsnprintf",
    "vscnprintf",
    "snprintf",
    "scnprintf",
    "vsprintf",
    "sprintf",
]

INT_MAX = (1 << 31) - 1
_POINTER_DIGITS = 8
_NULL_TEXT = "<NULL>"
_DIGITS = re.compile(r"[0-9]+")


class _Flag(IntFlag):
    ZEROPAD = 1
    SIGN = 2
    PLUS = 4
    SPACE = 8
    LEFT = 16
    SPECIAL = 32  # also selects lower-case hex digits
    LARGE = 64


_FLAG_CHARS = {
    "-": _Flag.LEFT,
    "+": _Flag.PLUS,
    " ": _Flag.SPACE,
    "#": _Flag.SPECIAL,
    "0": _Flag.ZEROPAD,
}

_BASES = {"o": 8, "x": 16, "X": 16, "d": 10, "i": 10, "u": 10}

_QUALIFIER_BITS = {"L": 64, "l": 32, "z": 32, "Z": 32, "h": 16, "": 32}


def _next_arg(values: Iterator[object]) -> object:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _next_int(values: Iterator[object]) -> int:
    value = _next_arg(values)
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _number(num: int, base: int, size: int, precision: int, flags: _Flag) -> str:
    if flags & _Flag.LEFT:
        flags &= ~_Flag.ZEROPAD

    sign = ""
    if flags & _Flag.SIGN:
        if num < 0:
            sign = "-"
            num = -num
        elif flags & _Flag.PLUS:
            sign = "+"
        elif flags & _Flag.SPACE:
            sign = " "
    size -= len(sign)

    prefix = ""
    if flags & _Flag.SPECIAL and base != 10:
        prefix = "0x" if base == 16 else "0"
    size -= len(prefix)

    if base == 10:
        digits = str(num)
    elif base == 8:
        digits = format(num, "o")
    else:
        digits = format(num, "x" if flags & _Flag.SPECIAL else "X")

    precision = max(precision, len(digits))
    size -= precision
    fill = max(size, 0)
    body = "0" * (precision - len(digits)) + digits

    if flags & _Flag.LEFT:
        return sign + prefix + body + " " * fill
    if flags & _Flag.ZEROPAD:
        return sign + prefix + "0" * fill + body
    return " " * fill + sign + prefix + body


def _char_arg(values: Iterator[object]) -> str:
    value = _next_arg(values)
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"expected a character argument, got {type(value).__name__}")


def _string_arg(values: Iterator[object]) -> str:
    value = _next_arg(values)
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"expected a string argument, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _render(fmt: str, args: Iterable[object]) -> str:
    fmt = fmt.split("\0", 1)[0]
    values = iter(args)
    out: list[str] = []
    pos, end = 0, len(fmt)

    while pos < end:
        if fmt[pos] != "%":
            stop = fmt.find("%", pos)
            stop = end if stop < 0 else stop
            out.append(fmt[pos:stop])
            pos = stop
            continue
        pos += 1

        flags = _Flag(0)
        while pos < end and fmt[pos] in _FLAG_CHARS:
            flags |= _FLAG_CHARS[fmt[pos]]
            pos += 1

        width = -1
        match = _DIGITS.match(fmt, pos)
        if match:
            width, pos = int(match.group()), match.end()
        elif fmt.startswith("*", pos):
            pos += 1
            width = _next_int(values)
            if width < 0:
                width = -width
                flags |= _Flag.LEFT

        precision = -1
        if fmt.startswith(".", pos):
            pos += 1
            match = _DIGITS.match(fmt, pos)
            if match:
                precision, pos = int(match.group()), match.end()
            elif fmt.startswith("*", pos):
                pos += 1
                precision = _next_int(values)
            precision = max(precision, 0)

        qualifier = ""
        if pos < end and fmt[pos] in "hlLZz":
            qualifier = fmt[pos]
            pos += 1
            if qualifier == "l" and fmt.startswith("l", pos):
                qualifier = "L"
                pos += 1

        conversion = fmt[pos] if pos < end else ""
        pos += 1

        if conversion == "c":
            ch = _char_arg(values)
            pad = " " * max(width - 1, 0)
            out.append(ch + pad if flags & _Flag.LEFT else pad + ch)
        elif conversion == "s":
            text = _string_arg(values)
            if precision >= 0:
                text = text[:precision]
            pad = " " * max(width - len(text), 0)
            out.append(text + pad if flags & _Flag.LEFT else pad + text)
        elif conversion == "p":
            if width == -1:
                width = _POINTER_DIGITS
                flags |= _Flag.ZEROPAD
            address = _next_int(values) & 0xFFFFFFFF
            out.append(_number(address, 16, width, precision, flags))
        elif conversion == "n":
            target = _next_arg(values)
            if not callable(target):
                raise TypeError("%n expects a callable to receive the count")
            report: Callable[[int], object] = target
            report(sum(map(len, out)))
        elif conversion == "%":
            out.append("%")
        elif conversion in _BASES:
            if conversion == "X":
                flags |= _Flag.LARGE
            if conversion in "di":
                flags |= _Flag.SIGN
            signed = bool(flags & _Flag.SIGN) and qualifier not in ("z", "Z")
            num = _wrap(_next_int(values), _QUALIFIER_BITS[qualifier], signed)
            out.append(_number(num, _BASES[conversion], width, precision, flags))
        else:
            out.append("%" + conversion)

    return "".join(out)


def vsnprintf(size: int, fmt: str, args: Iterable[object]) -> tuple[str, int]:
    """Format into a buffer of ``size`` characters, terminator included.

    Returns ``(text, length)``: the text that fits the buffer and the length
    the complete output would have had.
    """
    if size < 0:
        raise ValueError(f"buffer size {size} is negative")
    full = _render(fmt, args)
    text = full[: size - 1] if size > 0 else ""
    return text, len(full)


def vscnprintf(size: int, fmt: str, args: Iterable[object]) -> tuple[str, int]:
    """Like :func:`vsnprintf`, but the count is of characters actually stored."""
    text, length = vsnprintf(size, fmt, args)
    return text, max(min(length, size - 1), 0)


def snprintf(size: int, fmt: str, *args: object) -> tuple[str, int]:
    """Format the arguments into a buffer of ``size`` characters."""
    return vsnprintf(size, fmt, args)


def scnprintf(size: int, fmt: str, *args: object) -> tuple[str, int]:
    """Format the arguments; the count is of characters actually stored."""
    return vscnprintf(size, fmt, args)


def vsprintf(fmt: str, args: Iterable[object]) -> str:
    """Format a sequence of arguments without a practical size limit."""
    text, _ = vsnprintf(INT_MAX, fmt, args)
    return text


def sprintf(fmt: str, *args: object) -> str:
    """Format the arguments without a practical size limit."""
    return vsprintf(fmt, args)