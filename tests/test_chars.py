import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cstrkit import chars

CODES = range(-5, 300)


def _as_char(code):
    return chr(code) if 0 <= code < 0x110000 else None


@pytest.mark.parametrize("code", CODES)
def test_isalpha_matches_ascii_letters(code):
    ch = _as_char(code)
    assert chars.isalpha(code) == (ch is not None and ch in string.ascii_letters)


@pytest.mark.parametrize("code", CODES)
def test_isdigit_matches_ascii_digits(code):
    ch = _as_char(code)
    assert chars.isdigit(code) == (ch is not None and ch in string.digits)


@pytest.mark.parametrize("code", CODES)
def test_isalnum_is_alpha_or_digit(code):
    assert chars.isalnum(code) == (chars.isalpha(code) or chars.isdigit(code))


@pytest.mark.parametrize("code", CODES)
def test_isascii_matches_str_isascii(code):
    ch = _as_char(code)
    assert chars.isascii(code) == (ch is not None and ch.isascii())


@pytest.mark.parametrize("code", CODES)
def test_isprint_matches_printable_ascii(code):
    ch = _as_char(code)
    expected = ch is not None and ch.isascii() and ch.isprintable()
    assert chars.isprint(code) == expected


def test_str_and_int_inputs_agree():
    for ch in string.printable:
        assert chars.isalpha(ch) == chars.isalpha(ord(ch))
        assert chars.isprint(ch) == chars.isprint(ord(ch))


def test_space_is_printable_but_delete_is_not():
    assert chars.isprint(" ")
    assert not chars.isprint(chr(127))


def test_non_ascii_letter_is_not_alpha():
    assert not chars.isalpha("é")
    assert not chars.isalnum("é")


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_toupper_on_lowercase(ch):
    assert chars.toupper(ch) == ch.upper()
    assert chars.toupper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_tolower_on_uppercase(ch):
    assert chars.tolower(ch) == ch.lower()
    assert chars.tolower(ord(ch)) == ord(ch.lower())


@given(st.integers(min_value=-1000, max_value=1000))
def test_case_conversion_leaves_non_letters_alone(code):
    if not chars.isalpha(code):
        assert chars.toupper(code) == code
        assert chars.tolower(code) == code


@given(st.sampled_from(string.ascii_letters))
def test_case_round_trip(ch):
    assert chars.tolower(chars.toupper(ch)) == ch.lower()
    assert chars.toupper(chars.tolower(ch)) == ch.upper()


def test_non_ascii_is_not_converted():
    assert chars.toupper("é") == "é"
    assert chars.tolower("É") == "É"


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        chars.isalpha("ab")
    with pytest.raises(ValueError):
        chars.toupper("")


def test_wrong_type_is_rejected():
    with pytest.raises(TypeError):
        chars.isdigit(1.5)
    with pytest.raises(TypeError):
        chars.tolower(b"A")