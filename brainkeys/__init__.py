"""Bech32/SegWit encoding, 320-bit integer helpers and secp256k1 field arithmetic."""

__version__ = "0.1.0"