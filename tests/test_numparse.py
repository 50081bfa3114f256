import pytest

from fractview.numparse import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    int_to_str,
    is_float,
    is_invalid_int,
    parse_float,
    parse_int,
    parse_long,
)


@pytest.mark.parametrize("number", [0, 1, -1, 42, -2842, INT_MAX, INT_MIN])
def test_int_round_trip(number):
    text = int_to_str(number)
    assert text == str(number)
    assert parse_int(text) == number
    assert parse_long(text) == number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  \t\n42", 42),
        ("+17", 17),
        ("-17", -17),
        ("123abc", 123),
        ("12 34", 12),
    ],
)
def test_parse_int_reads_leading_integer(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-5", "- 5"])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0
    assert parse_long(text) == 0


def test_parse_int_stops_at_nul():
    assert parse_int("12\x0034") == 12


def test_parse_int_wraps_to_32_bits_but_long_does_not():
    text = "2147483648"
    assert parse_long(text) == int(text)
    assert parse_int(text) == INT_MIN
    assert not is_invalid_int(parse_int("99999999999"))


def test_parse_long_wraps_to_64_bits():
    assert parse_long(str(LONG_MAX)) == LONG_MAX
    assert parse_long(str(LONG_MAX + 1)) == -LONG_MAX - 1


@pytest.mark.parametrize(
    "text", ["0.8", "-0.8", "0.156", "-0.2842", "-0.70176", "1.5", "3", "+2.25"]
)
def test_parse_float_matches_builtin_for_plain_decimals(text):
    assert parse_float(text) == float(text)


def test_parse_float_tolerates_padding_and_trailing_text():
    assert parse_float("   -0.5xyz") == float("-0.5")
    assert parse_float("7.") == float("7")
    assert parse_float(".25") == float(".25")
    assert parse_float("abc") == 0.0


@pytest.mark.parametrize(
    "text", ["1", "-0.8", "0.156", " +3. ", ".5", "\t42\n", "007"]
)
def test_is_float_accepts(text):
    assert is_float(text)


@pytest.mark.parametrize(
    "text", ["", " ", ".", "-", "1.2.3", "abc", "1a", "--1", "1 2", "1e5"]
)
def test_is_float_rejects(text):
    assert not is_float(text)


def test_is_float_ignores_text_after_nul():
    assert is_float("1.5\x00junk")


def test_accepted_floats_parse_like_builtin():
    for text in ["-0.8", "0.156", " 1.5 "]:
        assert is_float(text)
        assert parse_float(text) == float(text)


def test_is_invalid_int_bounds():
    assert not is_invalid_int(INT_MAX)
    assert not is_invalid_int(INT_MIN)
    assert is_invalid_int(INT_MAX + 1)
    assert is_invalid_int(INT_MIN - 1)


def test_int_to_str_rejects_out_of_range():
    with pytest.raises(OverflowError):
        int_to_str(INT_MAX + 1)
    with pytest.raises(OverflowError):
        int_to_str(INT_MIN - 1)