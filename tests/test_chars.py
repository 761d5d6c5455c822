import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ASCII = range(128)
WIDE = range(-5, 300)


@pytest.mark.parametrize("code", WIDE)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert is_alpha(code) == expected


@pytest.mark.parametrize("code", WIDE)
def test_is_digit_matches_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert is_digit(code) == expected


@pytest.mark.parametrize("code", WIDE)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert all(is_ascii(code) for code in ASCII)
    assert not is_ascii(-1)
    assert not is_ascii(128)


@pytest.mark.parametrize("code", ASCII)
def test_is_print_matches_str_isprintable(code):
    assert is_print(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", WIDE)
def test_is_space_matches_string_whitespace(code):
    expected = 0 <= code < 128 and chr(code) in string.whitespace
    assert is_space(code) == expected


@pytest.mark.parametrize("code", ASCII)
def test_case_conversion_matches_str_methods(code):
    ch = chr(code)
    assert to_lower(code) == ord(ch.lower())
    assert to_upper(code) == ord(ch.upper())


@pytest.mark.parametrize("code", range(128, 300))
def test_case_conversion_leaves_non_ascii_alone(code):
    assert to_lower(code) == code
    assert to_upper(code) == code


def test_string_arguments_keep_their_type():
    assert to_lower("Q") == "q"
    assert to_upper("q") == "Q"
    assert to_upper("7") == "7"
    assert is_alpha("x") and not is_alpha("7")


def test_case_round_trip_on_letters():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_non_character_types():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)