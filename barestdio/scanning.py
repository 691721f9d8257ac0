"""String-to-number conversion and scanf-style parsing.

The ``simple_strto*`` functions return ``(value, end)``, where ``end`` is the
index of the first character that was not consumed.  Results wrap to the C
type the function is named after: 32 bits for the ``long`` variants and
64 bits for the ``long long`` ones.

:func:`vsscanf` supports ``%c %s %n %% %d %i %u %o %x %X`` and ``%*``, with a
field width and the length qualifiers ``hh h l ll L z Z``.  It returns the
stored values in format order.  ``%n`` stores the number of characters
consumed so far; like the other conversions it appears in the result, but it
is not counted as a conversion.
"""

from barestdio.ctype import isdigit, islower, isspace, isxdigit, toupper
from barestdio.formatting import INT_MAX

__all__ = [
    "simple_strtoul",
    "simple_strtol",
    "simple_strtoull",
    "simple_strtoll",
    "vsscanf",
    "sscanf",
]

_NUL = "\0"


def _cstr(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else _NUL


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _digit_value(ch: str) -> int:
    if isdigit(ch):
        return ord(ch) - ord("0")
    upper = toupper(ch) if islower(ch) else ch
    return ord(upper) - ord("A") + 10


def _parse_unsigned(text: str, base: int) -> tuple[int, int]:
    pos = 0
    if not base:
        base = 10
        if _at(text, pos) == "0":
            base = 8
            pos += 1
            if toupper(_at(text, pos)) == "X" and isxdigit(_at(text, pos + 1)):
                pos += 1
                base = 16
    elif base == 16:
        if _at(text, 0) == "0" and toupper(_at(text, 1)) == "X":
            pos += 2

    result = 0
    while isxdigit(_at(text, pos)):
        value = _digit_value(_at(text, pos))
        if value >= base:
            break
        result = result * base + value
        pos += 1
    return result, pos


def _parse_signed(text: str, base: int) -> tuple[int, int]:
    if _at(text, 0) == "-":
        value, end = _parse_unsigned(text[1:], base)
        return -value, end + 1
    return _parse_unsigned(text, base)


def simple_strtoul(cp: str, base: int) -> tuple[int, int]:
    """Convert to an unsigned 32-bit value; ``base`` 0 detects 0/0x prefixes."""
    value, end = _parse_unsigned(_cstr(cp), base)
    return _wrap(value, 32, False), end


def simple_strtol(cp: str, base: int) -> tuple[int, int]:
    """Convert to a signed 32-bit value, accepting a leading minus sign."""
    value, end = _parse_signed(_cstr(cp), base)
    return _wrap(value, 32, True), end


def simple_strtoull(cp: str, base: int) -> tuple[int, int]:
    """Convert to an unsigned 64-bit value."""
    value, end = _parse_unsigned(_cstr(cp), base)
    return _wrap(value, 64, False), end


def simple_strtoll(cp: str, base: int) -> tuple[int, int]:
    """Convert to a signed 64-bit value, accepting a leading minus sign."""
    value, end = _parse_signed(_cstr(cp), base)
    return _wrap(value, 64, True), end


_INTEGER_BASES = {"o": 8, "x": 16, "X": 16, "i": 0, "d": 10, "u": 10}

_QUALIFIER_BITS = {"H": 8, "h": 16, "l": 32, "L": 64, "z": 32, "Z": 32, "": 32}


def _digit_ok(digit: str, base: int) -> bool:
    if digit == _NUL:
        return False
    if base == 16:
        return isxdigit(digit)
    if base == 8:
        return isdigit(digit) and digit <= "7"
    return isdigit(digit)


def vsscanf(buf: str, fmt: str) -> list[int | str]:
    """Parse ``buf`` according to ``fmt`` and return the stored values."""
    text, fmt = _cstr(buf), _cstr(fmt)
    values: list[int | str] = []
    s = f = 0

    while f < len(fmt) and s < len(text):
        if isspace(fmt[f]):
            while isspace(_at(fmt, f)):
                f += 1
            while isspace(_at(text, s)):
                s += 1

        if f < len(fmt) and fmt[f] != "%":
            expected, got = fmt[f], _at(text, s)
            f += 1
            s += 1
            if expected != got:
                break
            continue

        if f >= len(fmt):
            break
        f += 1

        if _at(fmt, f) == "*":
            while f < len(fmt) and not isspace(fmt[f]):
                f += 1
            while s < len(text) and not isspace(text[s]):
                s += 1
            continue

        width = -1
        if isdigit(_at(fmt, f)):
            start = f
            while isdigit(_at(fmt, f)):
                f += 1
            width = int(fmt[start:f])

        qualifier = ""
        if _at(fmt, f) in "hlLZz" and f < len(fmt):
            qualifier = fmt[f]
            f += 1
            if _at(fmt, f) == qualifier and qualifier in "hl":
                qualifier = qualifier.upper() if qualifier == "h" else "L"
                f += 1

        if f >= len(fmt) or s >= len(text):
            break

        conversion = fmt[f]
        f += 1

        if conversion == "c":
            count = 1 if width == -1 else width
            start = s
            s += 1
            count -= 1
            while count > 0 and s < len(text):
                s += 1
                count -= 1
            values.append(text[start:s])
            continue
        if conversion == "s":
            limit = INT_MAX if width == -1 else width
            while isspace(_at(text, s)):
                s += 1
            start = s
            while s < len(text) and not isspace(text[s]) and limit:
                s += 1
                limit -= 1
            values.append(text[start:s])
            continue
        if conversion == "n":
            values.append(s)
            continue
        if conversion == "%":
            got = _at(text, s)
            s += 1
            if got != "%":
                return values
            continue
        if conversion not in _INTEGER_BASES:
            return values

        base = _INTEGER_BASES[conversion]
        is_sign = conversion in "id"

        while isspace(_at(text, s)):
            s += 1
        digit = _at(text, s)
        if is_sign and digit == "-":
            digit = _at(text, s + 1)
        if not _digit_ok(digit, base):
            break

        rest = text[s:]
        if qualifier == "L":
            value, used = (simple_strtoll if is_sign else simple_strtoull)(rest, base)
        elif qualifier in ("z", "Z"):
            value, used = simple_strtoul(rest, base)
        else:
            value, used = (simple_strtol if is_sign else simple_strtoul)(rest, base)
            value = _wrap(value, _QUALIFIER_BITS[qualifier], is_sign)
        values.append(value)
        s += used

    return values


def sscanf(buf: str, fmt: str) -> list[int | str]:
    """Parse ``buf`` according to ``fmt``; same as :func:`vsscanf`."""
    return vsscanf(buf, fmt)