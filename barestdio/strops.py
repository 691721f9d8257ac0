"""String and memory routines with NUL-terminated string semantics.

String arguments are Python ``str`` values; a string ends at its first
``"\\0"`` if it holds one.  Positions are returned as indexes, or ``None``
where nothing was found.  Memory routines work on bytes-like objects and
modify ``bytearray`` buffers in place.
"""

from collections.abc import Iterator
from itertools import islice, takewhile

from barestdio.ctype import tolower

__all__ = [
    "strnicmp",
    "strcmp",
    "strncmp",
    "strncpy",
    "strncat",
    "strchr",
    "strrchr",
    "strlen",
    "strnlen",
    "strspn",
    "strpbrk",
    "strstr",
    "strtok",
    "strsep",
    "memset",
    "memcpy",
    "memmove",
    "memcmp",
    "memscan",
    "memchr",
]


def _cstr(s: str) -> str:
    return s.split("\0", 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _signed_char(value: int) -> int:
    return ((value + 0x80) & 0xFF) - 0x80


def _pairs(cs: str, ct: str) -> Iterator[tuple[str, str]]:
    return zip(_cstr(cs) + "\0", _cstr(ct) + "\0")


def _check_count(data, count: int, what: str) -> None:
    if count < 0 or count > len(data):
        raise ValueError(f"count {count} does not fit {what} of length {len(data)}")


def strnicmp(s1: str, s2: str, length: int) -> int:
    """Compare at most ``length`` characters, ignoring case."""
    c1 = c2 = 0
    for x, y in islice(_pairs(s1, s2), max(length, 0)):
        c1, c2 = ord(x) & 0xFF, ord(y) & 0xFF
        if not c1 or not c2:
            break
        if c1 == c2:
            continue
        c1, c2 = tolower(c1), tolower(c2)
        if c1 != c2:
            break
    return c1 - c2


def strcmp(cs: str, ct: str) -> int:
    """Compare two strings; the sign of the result orders them."""
    for x, y in _pairs(cs, ct):
        diff = ord(x) - ord(y)
        if diff or x == "\0":
            return _signed_char(diff)
    return 0


def strncmp(cs: str, ct: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings."""
    for x, y in islice(_pairs(cs, ct), max(count, 0)):
        diff = ord(x) - ord(y)
        if diff or x == "\0":
            return _signed_char(diff)
    return 0


def strncpy(src: str, count: int) -> str:
    """Return what copying at most ``count`` characters of ``src`` yields."""
    return _cstr(src)[: max(count, 0)]


def strncat(dest: str, src: str, count: int) -> str:
    """Append at most ``count`` characters of ``src`` to ``dest``."""
    if count <= 0:
        return _cstr(dest)
    return _cstr(dest) + _cstr(src)[:count]


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    text, ch = _cstr(s), _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    text, ch = _cstr(s), _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strlen(s: str) -> int:
    """Length of the string up to its terminator."""
    return len(_cstr(s))


def strnlen(s: str, count: int) -> int:
    """Length of the string, but no more than ``count``."""
    return min(len(_cstr(s)), max(count, 0))


def strspn(s: str, accept: str) -> int:
    """Length of the leading run of ``s`` made only of ``accept`` characters."""
    allowed = set(_cstr(accept))
    return sum(1 for _ in takewhile(allowed.__contains__, _cstr(s)))


def strpbrk(cs: str, ct: str) -> int | None:
    """Index of the first character of ``cs`` that is in ``ct``."""
    wanted = set(_cstr(ct))
    return next((i for i, ch in enumerate(_cstr(cs)) if ch in wanted), None)


def strstr(s1: str, s2: str) -> int | None:
    """Index of the first occurrence of ``s2`` in ``s1``."""
    haystack, needle = _cstr(s1), _cstr(s2)
    if not needle:
        return 0
    index = haystack.find(needle)
    return None if index < 0 else index


def strtok(s: str, ct: str) -> Iterator[str]:
    """Yield the non-empty tokens of ``s`` separated by characters of ``ct``."""
    delimiters = set(_cstr(ct))
    token: list[str] = []
    for ch in _cstr(s):
        if ch in delimiters:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)


def strsep(s: str | None, ct: str) -> tuple[str | None, str | None]:
    """Split off the first token, empty tokens included.

    Returns ``(token, rest)``; ``rest`` is ``None`` once no delimiter is left.
    """
    if s is None:
        return None, None
    text = _cstr(s)
    end = strpbrk(text, ct)
    if end is None:
        return text, None
    return text[:end], text[end + 1 :]


def memset(buf: bytearray, c: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buf`` with ``c``."""
    _check_count(buf, count, "buffer")
    buf[:count] = bytes([c & 0xFF]) * count
    return buf


def memcpy(dest: bytearray, src, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(dest, count, "destination")
    _check_count(src, count, "source")
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buf: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buf`` from offset ``src`` to ``dest``.

    Overlapping areas are handled.
    """
    if dest < 0 or src < 0 or count < 0:
        raise ValueError("offsets and count must not be negative")
    if dest + count > len(buf) or src + count > len(buf):
        raise ValueError("area does not fit the buffer")
    buf[dest : dest + count] = bytes(buf[src : src + count])
    return buf


def memcmp(cs, ct, count: int) -> int:
    """Compare ``count`` bytes; returns the difference of the first mismatch."""
    _check_count(cs, count, "first area")
    _check_count(ct, count, "second area")
    return next(
        (x - y for x, y in zip(bytes(cs[:count]), bytes(ct[:count])) if x != y), 0
    )


def memscan(data, c: int, size: int) -> int:
    """Index of the first byte equal to ``c``, or ``size`` if none is."""
    _check_count(data, size, "area")
    return next((i for i, b in enumerate(bytes(data[:size])) if b == c), size)


def memchr(data, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256), or None."""
    _check_count(data, n, "area")
    target = c & 0xFF
    return next((i for i, b in enumerate(bytes(data[:n])) if b == target), None)