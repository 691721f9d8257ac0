import pytest

from barestdio.div64 import div64_32, do_div, muldi3

SAMPLES = [
    (0, 1),
    (12345, 7),
    ((1 << 32) - 1, 3),
    (1 << 32, 1 << 31),
    ((1 << 64) - 1, 10),
    ((1 << 64) - 1, (1 << 32) - 1),
    (0xDEADBEEFCAFEBABE, 100000),
]


@pytest.mark.parametrize("n, base", SAMPLES)
def test_div64_32_invariant(n, base):
    quotient, remainder = div64_32(n, base)
    assert quotient * base + remainder == n
    assert 0 <= remainder < base


@pytest.mark.parametrize("n, base", SAMPLES)
def test_div64_32_matches_divmod(n, base):
    assert div64_32(n, base) == divmod(n, base)


def test_div64_32_rejects_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        div64_32(10, 0)


@pytest.mark.parametrize("n, base", [(-1, 3), (1 << 64, 3), (5, 1 << 32), (5, -2)])
def test_div64_32_rejects_out_of_range(n, base):
    with pytest.raises(ValueError):
        div64_32(n, base)


def test_do_div_wraps_operands():
    assert do_div(-1, 10) == divmod((1 << 64) - 1, 10)
    assert do_div(100, (1 << 32) + 7) == divmod(100, 7)


def test_do_div_zero_after_wrap():
    with pytest.raises(ZeroDivisionError):
        do_div(100, 1 << 32)


@pytest.mark.parametrize("u, v", [(0, 5), (3, 7), (-3, 7), (-4, -9), (123456789, 987654)])
def test_muldi3_small_products(u, v):
    assert muldi3(u, v) == u * v


def test_muldi3_commutes():
    for u, v in [(1 << 40, 12345), (-(1 << 50), 999), (0x7FFFFFFF, 0xFFFFFFFF)]:
        assert muldi3(u, v) == muldi3(v, u)


def test_muldi3_wraps_to_signed():
    assert muldi3(1 << 62, 2) == -(1 << 63)
    assert muldi3(1 << 32, 1 << 32) == 0


def test_muldi3_result_in_range():
    for u, v in [(1 << 63, 3), ((1 << 64) - 1, (1 << 64) - 1), (-(1 << 63), -1)]:
        result = muldi3(u, v)
        assert -(1 << 63) <= result < (1 << 63)
        assert (result - u * v) % (1 << 64) == 0