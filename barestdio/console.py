"""Line-oriented console I/O on top of the formatter and scanner."""

import sys
from collections.abc import Callable

from barestdio.formatting import sprintf
from barestdio.scanning import vsscanf

__all__ = ["Console", "printf", "scanf"]

_LINE_ENDS = ("\r", "\n")


def _stdout_write(ch: str) -> None:
    sys.stdout.write(ch)


def _stdin_read() -> str:
    return sys.stdin.read(1)


class Console:
    """A character device with formatted output and line-based input.

    ``write`` is called with one character at a time; ``read`` returns one
    character, or an empty string at end of input.
    """

    def __init__(
        self,
        write: Callable[[str], object] | None = None,
        read: Callable[[], str] | None = None,
    ) -> None:
        self._write = write or _stdout_write
        self._read = read or _stdin_read

    def putc(self, ch: str) -> None:
        """Send one character."""
        self._write(ch)

    def getc(self) -> str:
        """Receive one character; raises EOFError when input is exhausted."""
        ch = self._read()
        if not ch:
            raise EOFError("console input exhausted")
        return ch

    def printf(self, fmt: str, *args: object) -> int:
        """Format and send the text; returns the length of the formatted text.

        Output stops at the first NUL character in the formatted text.
        """
        text = sprintf(fmt, *args)
        for ch in text.split("\0", 1)[0]:
            self.putc(ch)
        return len(text)

    def scanf(self, fmt: str) -> list[int | str]:
        """Read and echo one line, then parse it with ``fmt``."""
        line: list[str] = []
        while True:
            ch = self.getc()
            self.putc(ch)
            if ch in _LINE_ENDS:
                break
            line.append(ch)
        return vsscanf("".join(line), fmt)


_default = Console()


def printf(fmt: str, *args: object) -> int:
    """Format to standard output."""
    return _default.printf(fmt, *args)


def scanf(fmt: str) -> list[int | str]:
    """Read a line from standard input, echoing it, and parse it."""
    return _default.scanf(fmt)