import pytest

from zxkit.zxformat import BufferTooSmallError, asciify, int_to_fixed_point, str3join


def test_str3join_nothing_added():
    assert str3join("TEST", "", "", 10) == "TEST"


def test_str3join_no_prefix():
    assert str3join("TEST", "", "1", 10) == "TEST1"


def test_str3join_prefix_simple():
    assert str3join("TEST", "xyz ", "1", 10) == "xyz TEST1"


@pytest.mark.parametrize("size", [10, 9])
def test_str3join_limit_buffer_fits(size):
    assert str3join("TEST", "xyz", "4", size) == "xyzTEST4"


@pytest.mark.parametrize("size", [8, 7])
def test_str3join_buffer_too_small(size):
    with pytest.raises(BufferTooSmallError):
        str3join("TEST", "xyz", "4", size)


def test_str3join_unbounded():
    assert str3join("mid", "<", ">") == "<mid>"


def test_asciify_plain_ascii():
    assert asciify(b"hello world") == "hello world"


def test_asciify_replaces_non_ascii():
    assert asciify("h\u00e9llo".encode("utf-8")) == "h.llo"
    assert asciify("a\u20acb") == "a.b"


def test_asciify_replaces_control_characters():
    assert asciify(b"a\tb") == "a.b"


def test_asciify_stops_at_nul():
    assert asciify(b"ab\x00cd") == "ab"


def test_asciify_invalid_utf8_gives_empty():
    assert asciify(b"ab\xffcd") == ""


@pytest.mark.parametrize(
    "number, places, expected",
    [
        ("12345", 2, "123.45"),
        ("1", 3, "0.001"),
        ("", 2, "0.00"),
        ("0042", 0, "42"),
        ("000", 0, "0"),
        ("100", 2, "1.00"),
    ],
)
def test_int_to_fixed_point(number, places, expected):
    assert int_to_fixed_point(number, places) == expected


def test_int_to_fixed_point_rejects_non_digits():
    with pytest.raises(ValueError):
        int_to_fixed_point("12a4", 2)


def test_int_to_fixed_point_input_too_long():
    with pytest.raises(BufferTooSmallError):
        int_to_fixed_point("12345", 2, max_size=5)


def test_int_to_fixed_point_result_too_long():
    with pytest.raises(BufferTooSmallError):
        int_to_fixed_point("12345", 2, max_size=6)
    assert int_to_fixed_point("12345", 2, max_size=7) == "123.45"