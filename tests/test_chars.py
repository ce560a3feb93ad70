import string

import pytest

from cubscene.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_whitespace,
    to_lower,
    to_upper,
)

ALL_ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alnum_is_union_of_alpha_and_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_digit("٣") is False


def test_is_ascii_range():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


@pytest.mark.parametrize("code", range(0, 200))
def test_is_print_bounds(code):
    assert is_print(code) == (32 <= code < 127)


def test_is_print_space_and_delete():
    assert is_print(" ") is True
    assert is_print(127) is False
    assert is_print("~") is True


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_whitespace_matches_string_whitespace(c):
    assert is_whitespace(c) == (c in string.whitespace)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_to_upper_matches_str_upper(c):
    assert to_upper(c) == c.upper()


@pytest.mark.parametrize("c", ALL_ASCII)
def test_to_lower_matches_str_lower(c):
    assert to_lower(c) == c.lower()


def test_conversions_keep_integer_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("5")) == ord("5")


def test_non_ascii_left_unchanged():
    assert to_upper("é") == "é"
    assert to_lower(300) == 300


@pytest.mark.parametrize("c", string.ascii_letters)
def test_case_round_trip(c):
    assert to_lower(to_upper(c)) == c.lower()
    assert to_upper(to_lower(c)) == c.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_empty_string_rejected():
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)