# zxkit

Small, dependency-free helpers for the encoding and formatting work that
hardware-wallet style applications do all the time:

- `zxkit.segwit`: Bech32 / Bech32m encoding and decoding (`bech32_encode`,
  `bech32_decode`), SegWit addresses (`segwit_addr_encode`,
  `segwit_addr_decode`) and bit regrouping (`convert_bits`).
- `zxkit.bech32`: encode raw bytes straight to a Bech32 string
  (`bech32_encode_from_bytes`), with an input limit of 64 bytes.
- `zxkit.base58`: Base58 encoding and decoding with the Bitcoin alphabet
  (`encode_base58`, `decode_base58`, `encode_base58_clip`), limited to
  120 input bytes for encoding and 164 characters for decoding.
- `zxkit.base64`: padded Base64 encoding (`base64_encode`) with an optional
  check of the destination size.
- `zxkit.bignum`: conversion of little- or big-endian binary numbers to
  packed BCD and printing of that BCD as decimal text.
- `zxkit.sigutils`: turn a DER-encoded ECDSA signature into 32-byte R,
  32-byte S and a recovery value V (`convert_der_to_rsv`, `RsvSignature`).
- `zxkit.hexutils`: strict hex-string parsing (`parse_hex_string`,
  `hex_digit_value`).
- `zxkit.timeutils`: UTC date breakdown (`extract_time`, `TimeData`) and
  formatting (`print_time`, `print_time_special_format`) of Unix
  timestamps for the years 1970 to 2368.
- `zxkit.zxformat`: ASCII folding (`asciify`), fixed-point number formatting
  (`int_to_fixed_point`) and bounded prefix/suffix joining (`str3join`).
- `zxkit.buffering`: an in-memory two-stage append buffer (`Buffering`) that
  writes to a small "RAM" area and moves everything to a larger "flash" area
  once the first overflows.
- `zxkit.apdu`: ISO 7816 status words (`ApduCode`) and their two-byte
  big-endian form (`encode_status`).
- `zxkit.nanos_font`: pixel width of a line of text in a small 11px device
  font (`line_width`).
- `zxkit.utf8codec`, `zxkit.utf8case`, `zxkit.utf8text`: byte-level UTF-8
  helpers for zero-terminated text: codepoint encoding and validation, case
  mapping for Latin, Greek and Cyrillic letters, searching, comparison and
  measuring.

## Installation

```
pip install zxkit
```

For development and running the test suite:

```
pip install -e ".[test]"
pytest
```

## Examples

```python
from zxkit.hexutils import parse_hex_string
from zxkit.bignum import little_endian_to_bcd, format_bcd_little_endian
from zxkit.segwit import segwit_addr_encode, segwit_addr_decode
from zxkit.sigutils import convert_der_to_rsv
from zxkit.timeutils import print_time

value = parse_hex_string("e803", 100)          # b"\xe8\x03"
bcd = little_endian_to_bcd(value, 100)
print(format_bcd_little_endian(bcd, 300))      # "1000"

address = segwit_addr_encode("bc", 0, bytes(20))
version, program = segwit_addr_decode("bc", address)

print(print_time(0))                           # "01Jan1970 00:00:00UTC"
```

Functions raise exceptions on bad input (for example `Bech32Error`,
`Base58Error`, `BcdFormatError`, `DerConversionError`,
`BufferTooSmallError`, or plain `ValueError`) instead of returning status
codes.

## What it does not do

zxkit is a library of pure functions and small in-memory classes. It does
not talk to any device, does not send or receive APDUs (it only defines the
status words), does not sign anything (it only reshapes existing DER
signatures), and `Buffering` keeps its data in memory only; nothing is
written to persistent storage. There is no command-line tool.