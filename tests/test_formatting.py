import io

import pytest

from ftkit.formatting import fprintf, printf, sprintf


def test_plain_text_is_unchanged():
    text = "nothing to format here"
    assert sprintf(text) == text


def test_string_conversion_inserts_argument():
    assert sprintf("a%sb", "middle") == "a" + "middle" + "b"


def test_string_conversion_of_none():
    assert sprintf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n


def test_decimal_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 255, 3054, 65535, 2**31])
def test_hex_round_trip_lowercase(n):
    out = sprintf("%x", n)
    assert int(out, 16) == n
    assert out == out.lower()


@pytest.mark.parametrize("n", [10, 48879, 2**32 - 1])
def test_upper_hex_matches_lower_hex(n):
    assert sprintf("%X", n) == sprintf("%x", n).upper()


def test_unsigned_takes_negative_modulo_2_32():
    assert int(sprintf("%u", -1)) == 2**32 - 1


def test_unsigned_round_trip():
    assert int(sprintf("%u", 4096)) == 4096


def test_char_from_string_and_code():
    assert sprintf("%c", "Q") == "Q"
    assert sprintf("%c", ord("Z")) == "Z"


def test_char_zero_gives_nothing():
    assert sprintf("[%c]", 0) == "[" + "]"


def test_unknown_conversion_is_copied():
    assert sprintf("%q") == "%q"
    assert sprintf("100%%") == "100%%"


def test_trailing_percent_is_kept():
    assert sprintf("abc%") == "abc%"


def test_several_conversions_in_order():
    out = sprintf("%s=%d", "key", 42)
    name, value = out.split("=")
    assert name == "key"
    assert int(value) == 42


def test_too_few_arguments():
    with pytest.raises(TypeError):
        sprintf("%s and %s", "one")


def test_none_format_raises():
    with pytest.raises(TypeError):
        sprintf(None)


def test_bad_char_argument():
    with pytest.raises(ValueError):
        sprintf("%c", "ab")


def test_fprintf_writes_and_counts():
    buf = io.StringIO()
    count = fprintf(buf, "%s-%d", "x", 5)
    assert buf.getvalue() == sprintf("%s-%d", "x", 5)
    assert count == len(buf.getvalue())


def test_printf_writes_to_stdout(capsys):
    count = printf("%s!", "hello")
    out = capsys.readouterr().out
    assert out == "hello!"
    assert count == len(out)