import pytest

from pushswap.printf import (
    format_hex,
    format_pointer,
    format_signed,
    format_str,
    format_unsigned,
    printf,
    render,
)


@pytest.mark.parametrize("number", [1, 9, 10, 15, 16, 255, 4096, 123456789, 2**32 - 1])
def test_format_hex_round_trip(number):
    assert int(format_hex(number, False), 16) == number


@pytest.mark.parametrize("number", [10, 171, 3735928559])
def test_format_hex_upper_matches_lower(number):
    assert format_hex(number, True) == format_hex(number, False).upper()
    assert format_hex(number, False) == format_hex(number, False).lower()


def test_format_hex_zero():
    assert format_hex(0, False) == "0"


def test_format_hex_negative_wraps():
    assert int(format_hex(-1, False), 16) == 2**32 - 1


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483648])
def test_format_signed_round_trip(number):
    assert int(format_signed(number)) == number


def test_format_signed_wraps_to_32_bits():
    assert format_signed(2**32 - 1) == "-1"
    assert int(format_signed(2**31)) == -(2**31)


def test_format_unsigned_round_trip_and_wrap():
    assert int(format_unsigned(42)) == 42
    assert format_unsigned(0) == "0"
    assert int(format_unsigned(-1)) == 2**32 - 1


def test_format_pointer():
    assert format_pointer(0) == "(nil)"
    text = format_pointer(0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_format_str():
    assert format_str(None) == "(null)"
    assert format_str("abc") == "abc"
    with pytest.raises(TypeError):
        format_str(12)


def test_render_mixed():
    text = render("%s:%d:%c", "x", -5, "y")
    assert text == "x:-5:y"


def test_render_char_from_int():
    assert render("%c", ord("A")) == "A"


def test_render_percent_and_unknown():
    assert render("%%") == "%"
    assert render("a%zb") == "ab"
    assert render("end%") == "end"


def test_render_hex_conversions():
    assert render("%x", 3054) == format_hex(3054, False)
    assert render("%X", 3054) == format_hex(3054, True)
    assert render("%p", 0) == "(nil)"
    assert render("%s", None) == "(null)"


def test_render_missing_argument():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_render_bad_char():
    with pytest.raises(ValueError):
        render("%c", "ab")


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%u\n", "n", 12)
    out = capsys.readouterr().out
    assert out == render("%s=%u\n", "n", 12)
    assert count == len(out)