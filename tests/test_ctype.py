import string

import pytest

from barestdio import ctype

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_ascii_classes_match_standard_sets(ch):
    assert ctype.isdigit(ch) == (ch in string.digits)
    assert ctype.isxdigit(ch) == (ch in string.hexdigits)
    assert ctype.isupper(ch) == (ch in string.ascii_uppercase)
    assert ctype.islower(ch) == (ch in string.ascii_lowercase)
    assert ctype.isalpha(ch) == (ch in string.ascii_letters)
    assert ctype.isalnum(ch) == (ch in string.ascii_letters + string.digits)
    assert ctype.ispunct(ch) == (ch in string.punctuation)
    assert ctype.isspace(ch) == (ch in string.whitespace)


@pytest.mark.parametrize("code", range(128))
def test_ascii_control_and_print(code):
    control = code < 0x20 or code == 0x7F
    assert ctype.iscntrl(code) == control
    assert ctype.isprint(code) == (not control)
    assert ctype.isgraph(code) == (not control and code != ord(" "))


def test_int_and_str_agree():
    for code in range(256):
        assert ctype.isalpha(code) == ctype.isalpha(chr(code))
        assert ctype.ispunct(code) == ctype.ispunct(chr(code))


def test_codes_wrap_modulo_256():
    assert ctype.isdigit(ord("5") + 256) is True
    assert ctype.isupper(ord("Q") - 256) is True


def test_latin1_entries_from_table():
    assert ctype.isupper(0xC0)
    assert ctype.ispunct(0xD7)
    assert ctype.islower(0xDF)
    assert ctype.ispunct(0xF7)
    assert ctype.isspace(0xA0) and ctype.isprint(0xA0)
    assert not any(
        ctype.isprint(code) or ctype.iscntrl(code) for code in range(0x80, 0xA0)
    )


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_tolower_ascii(ch):
    assert ctype.tolower(ch) == ch.lower()
    assert ctype.toupper(ctype.tolower(ch)) == ch


@pytest.mark.parametrize("code", [c for c in range(0xC0, 0xDF) if c != 0xD7])
def test_tolower_latin1(code):
    ch = chr(code)
    assert ctype.tolower(ch) == ch.lower()
    assert ctype.tolower(code) == ord(ch.lower())


def test_case_mapping_leaves_non_letters():
    for ch in string.digits + string.punctuation + " ":
        assert ctype.tolower(ch) == ch
        assert ctype.toupper(ch) == ch


def test_toascii_and_isascii():
    for code in range(256):
        assert ctype.isascii(ctype.toascii(code))
        assert ctype.isascii(code) == (code < 128)
    for code in range(128):
        assert ctype.toascii(code) == code


def test_bad_argument_types():
    with pytest.raises(TypeError):
        ctype.isalpha("ab")
    with pytest.raises(TypeError):
        ctype.isdigit(1.5)