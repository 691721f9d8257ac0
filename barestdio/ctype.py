"""Character classification over a fixed Latin-1 table.

Every function accepts either an integer code or a one-character string.
Codes are taken modulo 256, as an ``unsigned char`` would be.
"""

from enum import IntFlag

__all__ = [
    "CharClass",
    "isalnum",
    "isalpha",
    "iscntrl",
    "isdigit",
    "isgraph",
    "islower",
    "isprint",
    "ispunct",
    "isspace",
    "isupper",
    "isxdigit",
    "isascii",
    "toascii",
    "tolower",
    "toupper",
]


class CharClass(IntFlag):
    """Classification bits stored for every character code."""

    UPPER = 0x01
    LOWER = 0x02
    DIGIT = 0x04
    CNTRL = 0x08
    PUNCT = 0x10
    SPACE = 0x20
    HEX = 0x40
    HARD_SPACE = 0x80


def _build_table() -> tuple[int, ...]:
    C = CharClass
    spans = [
        (range(0x00, 0x20), C.CNTRL),
        (range(0x09, 0x0E), C.CNTRL | C.SPACE),
        (range(0x20, 0x21), C.SPACE | C.HARD_SPACE),
        (range(0x21, 0x30), C.PUNCT),
        (range(0x30, 0x3A), C.DIGIT),
        (range(0x3A, 0x41), C.PUNCT),
        (range(0x41, 0x47), C.UPPER | C.HEX),
        (range(0x47, 0x5B), C.UPPER),
        (range(0x5B, 0x61), C.PUNCT),
        (range(0x61, 0x67), C.LOWER | C.HEX),
        (range(0x67, 0x7B), C.LOWER),
        (range(0x7B, 0x7F), C.PUNCT),
        (range(0x7F, 0x80), C.CNTRL),
        (range(0xA0, 0xA1), C.SPACE | C.HARD_SPACE),
        (range(0xA1, 0xC0), C.PUNCT),
        (range(0xC0, 0xD7), C.UPPER),
        (range(0xD7, 0xD8), C.PUNCT),
        (range(0xD8, 0xDF), C.UPPER),
        (range(0xDF, 0xF7), C.LOWER),
        (range(0xF7, 0xF8), C.PUNCT),
        (range(0xF8, 0x100), C.LOWER),
    ]
    table = [0] * 256
    for codes, flags in spans:
        for code in codes:
            table[code] = int(flags)
    return tuple(table)


_TABLE = _build_table()
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    if isinstance(c, int):
        return c & 0xFF
    raise TypeError(f"expected an int or a character, got {type(c).__name__}")


def _has(c: int | str, flags: CharClass) -> bool:
    return bool(_TABLE[_code(c)] & flags)


def isalnum(c: int | str) -> bool:
    """True for letters and digits."""
    return _has(c, CharClass.UPPER | CharClass.LOWER | CharClass.DIGIT)


def isalpha(c: int | str) -> bool:
    """True for upper- and lower-case letters."""
    return _has(c, CharClass.UPPER | CharClass.LOWER)


def iscntrl(c: int | str) -> bool:
    """True for control characters."""
    return _has(c, CharClass.CNTRL)


def isdigit(c: int | str) -> bool:
    """True for decimal digits."""
    return _has(c, CharClass.DIGIT)


def isgraph(c: int | str) -> bool:
    """True for visible characters other than space."""
    return _has(
        c, CharClass.PUNCT | CharClass.UPPER | CharClass.LOWER | CharClass.DIGIT
    )


def islower(c: int | str) -> bool:
    """True for lower-case letters."""
    return _has(c, CharClass.LOWER)


def isprint(c: int | str) -> bool:
    """True for printable characters, including the hard space."""
    return _has(
        c,
        CharClass.PUNCT
        | CharClass.UPPER
        | CharClass.LOWER
        | CharClass.DIGIT
        | CharClass.HARD_SPACE,
    )


def ispunct(c: int | str) -> bool:
    """True for punctuation."""
    return _has(c, CharClass.PUNCT)


def isspace(c: int | str) -> bool:
    """True for white space."""
    return _has(c, CharClass.SPACE)


def isupper(c: int | str) -> bool:
    """True for upper-case letters."""
    return _has(c, CharClass.UPPER)


def isxdigit(c: int | str) -> bool:
    """True for hexadecimal digits."""
    return _has(c, CharClass.DIGIT | CharClass.HEX)


def isascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return _code(c) <= 0x7F


def toascii(c: int | str) -> int | str:
    """Clear the top bit of the code."""
    code = _code(c) & 0x7F
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Lower-case an upper-case letter; other codes pass unchanged."""
    code = _code(c)
    if _TABLE[code] & CharClass.UPPER:
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Upper-case a lower-case letter; other codes pass unchanged."""
    code = _code(c)
    if _TABLE[code] & CharClass.LOWER:
        code = (code - _CASE_OFFSET) & 0xFF
    return chr(code) if isinstance(c, str) else code