import pytest

from barestdio.formatting import sprintf
from barestdio.scanning import (
    simple_strtol,
    simple_strtoll,
    simple_strtoul,
    simple_strtoull,
    sscanf,
    vsscanf,
)


def test_strtoul_decimal_stops_at_non_digit():
    assert simple_strtoul("123abc", 10) == (123, 3)


def test_strtoul_auto_hex():
    assert simple_strtoul("0x1A", 0) == (int("1A", 16), 4)


def test_strtoul_auto_octal():
    assert simple_strtoul("017", 0) == (int("17", 8), 3)


def test_strtoul_auto_zero_alone():
    value, end = simple_strtoul("0", 0)
    assert (value, end) == (0, 1)


def test_strtoul_auto_zero_x_without_digits_is_octal():
    value, end = simple_strtoul("0xg", 0)
    assert (value, end) == (0, 1)


def test_strtoul_base16_skips_prefix_even_without_digits():
    value, end = simple_strtoul("0x", 16)
    assert end == 2
    assert value == simple_strtoul("", 16)[0]


def test_strtoul_lowercase_hex():
    assert simple_strtoul("ff", 16) == (int("ff", 16), 2)


def test_strtoul_does_not_take_minus():
    assert simple_strtoul("-5", 10)[1] == simple_strtoul("", 10)[1]


def test_strtol_negative():
    assert simple_strtol("-42", 10) == (-42, 3)


def test_strtol_wraps_to_32_bits():
    assert simple_strtol("4294967295", 10) == (-1, 10)


def test_strtoul_wraps_to_32_bits():
    assert simple_strtoul("4294967296", 10) == (simple_strtoul("0", 10)[0], 10)


def test_strtoull_keeps_64_bits():
    assert simple_strtoull("18446744073709551615", 10) == (2**64 - 1, 20)
    assert simple_strtoll("18446744073709551615", 10) == (-1, 20)


def test_strtoll_negative():
    assert simple_strtoll("-4294967296", 10) == (-4294967296, 11)


def test_sscanf_mixed():
    assert sscanf("12 abc 7", "%d %s %u") == [12, "abc", 7]


def test_sscanf_char_with_width():
    assert sscanf("hello", "%3c") == ["hel"]


def test_sscanf_count_conversion():
    assert sscanf("abc 12", "%s%n") == ["abc", 3]


def test_sscanf_string_width():
    assert sscanf("abcdef", "%2s%s") == ["ab", "cdef"]


def test_literal_mismatch_stops():
    assert sscanf("a=5", "b=%d") == []


def test_literal_match():
    assert sscanf("a=5", "a=%d") == [5]


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 123456, 0x7FFFFFFF])
def test_hex_round_trip(n):
    assert sscanf(sprintf("%x", n), "%x") == [n]
    assert sscanf(sprintf("%#x", n), "%x") == [n]


@pytest.mark.parametrize("n", [-2147483648, -17, 0, 9, 2147483647])
def test_decimal_round_trip(n):
    assert sscanf(sprintf("%d", n), "%d") == [n]


@pytest.mark.parametrize("n", [0, 7, 8, 511])
def test_octal_round_trip(n):
    assert sscanf(sprintf("%o", n), "%o") == [n]


def test_octal_rejects_eight():
    assert sscanf("8", "%o") == []


def test_i_detects_base():
    assert sscanf("0x10 010 10", "%i %i %i") == [int("10", 16), int("10", 8), 10]


def test_hhu_wraps_to_byte():
    assert sscanf("255", "%hhu") == [255]
    assert sscanf("256", "%hhu") == sscanf("0", "%hhu")


def test_lld_keeps_64_bits():
    assert sscanf("-9223372036854775808", "%lld") == [-9223372036854775808]


def test_percent_literal():
    assert sscanf("100%", "%d%%") == [100]
    assert sscanf("100x5", "%d%%%d") == [100]


def test_invalid_conversion_stops():
    assert sscanf("5 6", "%d %q") == [5]


def test_skip_conversion():
    assert sscanf("skip 5", "%*s %d") == [5]


def test_minus_without_digit_fails():
    assert sscanf("-x", "%d") == []


def test_unsigned_rejects_minus():
    assert sscanf("-3", "%u") == []


def test_empty_buffer():
    assert vsscanf("", "%d") == []


def test_whitespace_in_format_matches_any_amount():
    assert vsscanf("1    2", "%d %d") == [1, 2]
    assert vsscanf("1 2", "%d%d") == [1, 2]