import pytest

from ftkit.numbers import absolute, itoa


@pytest.mark.parametrize("x", [-100, -1, 0, 1, 42, -2147483647])
def test_absolute_is_non_negative_and_same_magnitude(x):
    result = absolute(x)
    assert result >= 0
    assert result in (x, -x)


def test_absolute_of_negative():
    assert absolute(-7) == 7
    assert absolute(7) == 7


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -2147483648, 2147483647])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


@pytest.mark.parametrize("n", range(-1000, 1001, 37))
def test_itoa_matches_builtin_text(n):
    assert itoa(n) == str(n)


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_sign_only_for_negatives():
    assert itoa(5)[0] != "-"
    assert itoa(-5).startswith("-")
    assert itoa(-5)[1:] == itoa(5)


def test_rejects_non_int():
    with pytest.raises(TypeError):
        itoa(1.0)
    with pytest.raises(TypeError):
        absolute("3")