"""64-bit division and multiplication helpers."""

__all__ = ["div64_32", "do_div", "muldi3"]

_U32_MAX = (1 << 32) - 1
_U64_MAX = (1 << 64) - 1
_SIGN_BIT = 1 << 63


def div64_32(n: int, base: int) -> tuple[int, int]:
    """Divide a 64-bit unsigned value by a 32-bit unsigned divisor.

    Returns ``(quotient, remainder)``.
    """
    if not 0 <= n <= _U64_MAX:
        raise ValueError(f"dividend {n} is not an unsigned 64-bit value")
    if not 0 <= base <= _U32_MAX:
        raise ValueError(f"divisor {base} is not an unsigned 32-bit value")
    if base == 0:
        raise ZeroDivisionError("division by zero")
    return divmod(n, base)


def do_div(n: int, base: int) -> tuple[int, int]:
    """Divide ``n`` (taken modulo 2**64) by ``base`` (taken modulo 2**32).

    Returns ``(quotient, remainder)``.
    """
    return div64_32(n & _U64_MAX, base & _U32_MAX)


def muldi3(u: int, v: int) -> int:
    """Multiply two 64-bit values, wrapping to a signed 64-bit result."""
    product = (u * v) & _U64_MAX
    return product - (1 << 64) if product & _SIGN_BIT else product