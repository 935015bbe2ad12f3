import pytest

from zxkit.segwit import (
    BECH32M_CONST,
    Bech32Error,
    Encoding,
    bech32_decode,
    bech32_encode,
    convert_bits,
    polymod_step,
    segwit_addr_decode,
    segwit_addr_encode,
)

V0_ADDRESS = "BC1QW508D6QEJXTDG4Y5R3ZARVARY0C5XW7KV8F3T4"


def test_polymod_step_generator_constant():
    assert polymod_step(1 << 25) == 0x3B6A57B2


def test_polymod_step_zero_stays_zero():
    assert polymod_step(0) == 0


def test_decode_known_v0_address():
    version, program = segwit_addr_decode("bc", V0_ADDRESS)
    assert version == 0
    assert program.hex() == "751e76e8199196d454941c45d1b3a323f1433bd6"


def test_encode_known_v0_address_is_lower_case():
    _, program = segwit_addr_decode("bc", V0_ADDRESS)
    assert segwit_addr_encode("bc", 0, program) == V0_ADDRESS.lower()


def test_decode_minimal_bech32():
    assert bech32_decode("A12UEL5L") == ("a", [], Encoding.BECH32)


def test_decode_minimal_bech32m():
    assert bech32_decode("A1LQFN3A") == ("a", [], Encoding.BECH32M)


@pytest.mark.parametrize("encoding", [Encoding.BECH32, Encoding.BECH32M])
def test_bech32_round_trip(encoding):
    data = list(range(32))
    text = bech32_encode("test", data, encoding)
    assert bech32_decode(text) == ("test", data, encoding)
    assert bech32_decode(text.upper()) == ("test", data, encoding)


def test_final_constant_differs_between_encodings():
    assert BECH32M_CONST == 0x2BC830A3
    first = bech32_encode("ab", [1, 2, 3], Encoding.BECH32)
    second = bech32_encode("ab", [1, 2, 3], Encoding.BECH32M)
    assert first[:-6] == second[:-6]
    assert first[-6:] != second[-6:]


@pytest.mark.parametrize("data", [b"\x00", b"\xff", b"\x01\x02\x03", bytes(range(40))])
def test_convert_bits_round_trip(data):
    five = convert_bits(data, 8, 5, True)
    assert all(0 <= v < 32 for v in five)
    assert bytes(convert_bits(five, 5, 8, False)) == data


@pytest.mark.parametrize("values", [[31], [0]])
def test_convert_bits_rejects_bad_padding(values):
    with pytest.raises(Bech32Error):
        convert_bits(values, 5, 8, False)


@pytest.mark.parametrize("version,length", [(0, 20), (0, 32), (1, 32), (16, 2), (5, 40)])
def test_segwit_round_trip(version, length):
    program = bytes((i * 7 + 3) & 0xFF for i in range(length))
    address = segwit_addr_encode("tb", version, program)
    assert segwit_addr_decode("tb", address) == (version, program)
    expected = Encoding.BECH32 if version == 0 else Encoding.BECH32M
    assert bech32_decode(address)[2] == expected


@pytest.mark.parametrize(
    "version,length",
    [(17, 20), (-1, 20), (0, 21), (1, 1), (1, 41)],
)
def test_segwit_encode_rejects_invalid(version, length):
    with pytest.raises(Bech32Error):
        segwit_addr_encode("bc", version, bytes(length))


def test_segwit_decode_wrong_hrp():
    with pytest.raises(Bech32Error):
        segwit_addr_decode("tb", V0_ADDRESS)


def test_segwit_decode_v0_with_bech32m_rejected():
    data = [0, *convert_bits(bytes(20), 8, 5, True)]
    address = bech32_encode("bc", data, Encoding.BECH32M)
    with pytest.raises(Bech32Error):
        segwit_addr_decode("bc", address)


def test_segwit_decode_v1_with_bech32_rejected():
    data = [1, *convert_bits(bytes(32), 8, 5, True)]
    address = bech32_encode("bc", data, Encoding.BECH32)
    with pytest.raises(Bech32Error):
        segwit_addr_decode("bc", address)


def test_decode_mixed_case_rejected():
    with pytest.raises(Bech32Error):
        bech32_decode("a12UEL5L")


def test_decode_bad_checksum_rejected():
    text = V0_ADDRESS[:-1] + ("5" if V0_ADDRESS[-1] != "5" else "6")
    with pytest.raises(Bech32Error):
        bech32_decode(text)


@pytest.mark.parametrize("text", ["a1qqqqq", "1qqqqqqqq", "abcdefgh", "a1" + "q" * 89])
def test_decode_malformed_rejected(text):
    with pytest.raises(Bech32Error):
        bech32_decode(text)


def test_decode_invalid_data_character():
    with pytest.raises(Bech32Error):
        bech32_decode("a1bqqqqqq")


def test_encode_rejects_upper_case_hrp():
    with pytest.raises(Bech32Error):
        bech32_encode("BC", [0], Encoding.BECH32)


def test_encode_rejects_wide_value():
    with pytest.raises(Bech32Error):
        bech32_encode("bc", [32], Encoding.BECH32)


def test_encode_length_limit():
    assert len(bech32_encode("a", [0] * 82, Encoding.BECH32)) == 90
    with pytest.raises(Bech32Error):
        bech32_encode("a", [0] * 83, Encoding.BECH32)