import base64 as stdlib_base64

import pytest

from zxkit.base64 import base64_encode

SAMPLES = [b"", b"f", b"fo", b"foo", b"foob", b"fooba", b"foobar", bytes(range(256))]


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip(data):
    assert stdlib_base64.b64decode(base64_encode(data)) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_length_is_padded_to_four(data):
    encoded = base64_encode(data)
    assert len(encoded) == 4 * ((len(data) + 2) // 3)


@pytest.mark.parametrize("size, padding", [(3, 0), (4, 2), (5, 1)])
def test_padding_count(size, padding):
    encoded = base64_encode(bytes(size))
    assert len(encoded) - len(encoded.rstrip("=")) == padding


def test_known_vectors():
    assert base64_encode(b"foobar") == "Zm9vYmFy"
    assert base64_encode(b"f") == "Zg=="


def test_empty_input():
    assert base64_encode(b"", 1) == ""


def test_output_below_minimum_raises():
    with pytest.raises(ValueError):
        base64_encode(b"abcdefghijkl", 2)


def test_output_at_minimum_is_accepted():
    data = b"abcdefghijkl"
    assert stdlib_base64.b64decode(base64_encode(data, 3)) == data