"""Byte strings that know their textual encodings: hex, base64 and base58."""

from __future__ import annotations

import base64
import binascii
from typing import Any

_B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_INDEX = {ch: i for i, ch in enumerate(_B58_ALPHABET)}


def b58encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    data = bytes(data)
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_B58_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode Bitcoin base58 text; raise ValueError on a character outside the alphabet."""
    number = 0
    for ch in text:
        try:
            number = number * 58 + _B58_INDEX[ch]
        except KeyError:
            raise ValueError(f"invalid base58 character {ch!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_ones + body


def _require_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a JSON string, got {type(value).__name__}")
    return value


class HexData(bytes):
    """Bytes shown as a 0x-prefixed lower-case hex string."""

    @classmethod
    def parse(cls, text: str) -> HexData:
        """Parse hex text, with or without a 0x/0X prefix."""
        if text.startswith(("0x", "0X")):
            text = text[2:]
        try:
            return cls(binascii.unhexlify(text))
        except (binascii.Error, UnicodeEncodeError) as exc:
            raise ValueError(f"invalid hex string: {exc}") from exc

    def __str__(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def short_string(self) -> str:
        """Hex text with leading zero digits removed."""
        return "0x" + self.hex().lstrip("0")

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: Any) -> HexData:
        return cls.parse(_require_str(value))


class Base64Data(bytes):
    """Bytes shown as standard, padded base64."""

    @classmethod
    def parse(cls, text: str) -> Base64Data:
        """Parse standard base64 text."""
        try:
            return cls(base64.b64decode(text, validate=True))
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"invalid base64 string: {exc}") from exc

    def __str__(self) -> str:
        return base64.b64encode(self).decode("ascii")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: Any) -> Base64Data:
        return cls.parse(_require_str(value))


class Base58Data(bytes):
    """Bytes shown as Bitcoin-alphabet base58."""

    @classmethod
    def parse(cls, text: str) -> Base58Data:
        """Parse base58 text; text with characters outside the alphabet yields empty data."""
        try:
            return cls(b58decode(text))
        except ValueError:
            return cls(b"")

    def __str__(self) -> str:
        return b58encode(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: Any) -> Base58Data:
        return cls.parse(_require_str(value))