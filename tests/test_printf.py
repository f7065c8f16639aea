import io

import pytest

from pushswap.printf import printf, put_int, put_number_base, put_string


def _run(fmt, *args):
    buf = io.StringIO()
    count = printf(fmt, *args, stream=buf)
    return buf.getvalue(), count


def test_plain_text_is_copied():
    out, count = _run("hello")
    assert out == "hello"
    assert count == len("hello")


def test_percent_escape():
    out, count = _run("100%%")
    assert out == "100%"
    assert count == len(out)


def test_string_and_null():
    out, _ = _run("[%s]", "abc")
    assert out == "[abc]"
    out, count = _run("%s", None)
    assert out == "(null)"
    assert count == len("(null)")


def test_char_from_str_and_int():
    out, count = _run("%c%c", "x", ord("y"))
    assert out == "xy"
    assert count == 2


@pytest.mark.parametrize("value", [0, 7, -7, 2147483647, -2147483648])
def test_decimal_round_trip(value):
    for spec in ("%d", "%i"):
        out, count = _run(spec, value)
        assert int(out) == value
        assert count == len(out)


def test_decimal_wraps_to_32_bits():
    out, _ = _run("%d", 2**31)
    assert int(out) == -(2**31)


def test_unsigned_of_negative():
    out, _ = _run("%u", -1)
    assert int(out) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 1, 255, 48879, 2**32 - 1])
def test_hex_round_trip(value):
    lower, _ = _run("%x", value)
    upper, _ = _run("%X", value)
    assert int(lower, 16) == value
    assert int(upper, 16) == value
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_pointer_format():
    out, count = _run("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096
    assert count == len(out)


def test_null_pointer():
    out, _ = _run("%p", None)
    assert out == "0x0"


def test_unknown_conversion_writes_nothing():
    out, count = _run("a%qb")
    assert out == "ab"
    assert count == 2


def test_trailing_percent_writes_nothing():
    out, count = _run("ab%")
    assert out == "ab"
    assert count == 2


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        _run("%d")


def test_mixed_count_matches_output():
    out, count = _run("%s=%d (%x) %c%%", "n", -42, 42, "!")
    assert count == len(out)
    assert out.startswith("n=-42 (")


@pytest.mark.parametrize("value", [0, 1, 5, 1023, 123456789])
def test_put_number_base_binary(value):
    buf = io.StringIO()
    count = put_number_base(value, 2, "01", buf)
    assert int(buf.getvalue(), 2) == value
    assert count == len(buf.getvalue())


def test_put_number_base_rejects_bad_base():
    with pytest.raises(ValueError):
        put_number_base(5, 1, "0", io.StringIO())
    with pytest.raises(ValueError):
        put_number_base(5, 16, "0123", io.StringIO())


def test_put_number_base_rejects_negative():
    with pytest.raises(ValueError):
        put_number_base(-1, 10, "0123456789", io.StringIO())


def test_put_int_and_put_string_counts():
    buf = io.StringIO()
    assert put_int(-305, buf) == len("-305")
    assert put_string(None, buf) == len("(null)")
    assert buf.getvalue() == "-305(null)"