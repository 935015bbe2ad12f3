import pytest

from zxkit.utf8case import (
    is_lower,
    is_upper,
    lower,
    lower_codepoint,
    upper,
    upper_codepoint,
)

_OFFSET_RANGES = [
    range(0x41, 0x5B),
    range(0xC0, 0xD7),
    range(0xD8, 0xDF),
    range(0x391, 0x3A2),
    range(0x3A3, 0x3AC),
    range(0x400, 0x430),
]


@pytest.mark.parametrize("block", _OFFSET_RANGES)
def test_lower_codepoint_matches_unicode_for_simple_blocks(block):
    for cp in block:
        assert lower_codepoint(cp) == ord(chr(cp).lower())


@pytest.mark.parametrize("block", _OFFSET_RANGES)
def test_upper_inverts_lower_for_simple_blocks(block):
    for cp in block:
        assert upper_codepoint(lower_codepoint(cp)) == cp


def test_special_mappings_from_tables():
    assert lower_codepoint(0x0178) == 0x00FF
    assert upper_codepoint(0x00FF) == 0x0178
    assert upper_codepoint(0x03D1) == 0x0398


def test_paired_ranges_round_trip():
    for cp in range(0x0100, 0x0130, 2):
        assert lower_codepoint(cp) == cp + 1
        assert upper_codepoint(cp + 1) == cp
    for cp in range(0x0139, 0x0148, 2):
        assert lower_codepoint(cp) == cp + 1
        assert upper_codepoint(cp + 1) == cp


def test_non_letters_map_to_themselves():
    for cp in (0, ord("1"), ord(" "), 0x4E2D, 0x1F600):
        assert lower_codepoint(cp) == cp
        assert upper_codepoint(cp) == cp
        assert not is_lower(cp)
        assert not is_upper(cp)


def test_is_lower_and_is_upper():
    assert is_lower(ord("a"))
    assert not is_upper(ord("a"))
    assert is_upper(ord("Z"))
    assert not is_lower(ord("Z"))


def test_lower_and_upper_on_ascii_bytes():
    text = b"Hello, World 123"
    assert lower(text) == text.lower()
    assert upper(text) == text.upper()


def test_lower_and_upper_on_multibyte_text():
    text = "ΑΒΓ Привет Ärger"
    encoded = text.encode("utf-8")
    assert lower(encoded).decode("utf-8") == text.lower()
    assert upper(lower(encoded)).decode("utf-8") == text.upper()


def test_transform_stops_at_nul():
    data = b"AB\x00CD"
    assert lower(data) == b"AB".lower() + b"\x00CD"
    assert upper(b"ab\x00cd") == b"ab".upper() + b"\x00cd"


def test_length_is_preserved():
    data = "ŸÿΣσЁё".encode("utf-8")
    assert len(lower(data)) == len(data)
    assert len(upper(data)) == len(data)


def test_empty_input():
    assert lower(b"") == b""
    assert upper(b"") == b""