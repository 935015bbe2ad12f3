"""Encoding, formatting and signature helpers: Bech32, Base58, Base64, BCD numbers, DER signatures and UTF-8 tools."""

__version__ = "0.1.0"