"""C-style stdio routines: ctype, string and memory functions, printf/scanf formatting, 64-bit arithmetic and a console."""

__version__ = "0.1.0"
__all__ = ["console", "ctype", "div64", "formatting", "scanning", "strops"]