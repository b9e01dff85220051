"""Move language types: account addresses, type tags and struct tags."""

from __future__ import annotations

import binascii
import enum
from dataclasses import dataclass, field
from typing import Any, Optional

SUI_ADDRESS_LEN = 32

Identifier = str


class AccountAddress(bytes):
    """A 32-byte Move account address."""

    def __new__(cls, data: bytes = bytes(SUI_ADDRESS_LEN)) -> AccountAddress:
        if len(data) != SUI_ADDRESS_LEN:
            raise ValueError(f"an address is {SUI_ADDRESS_LEN} bytes, got {len(data)}")
        return super().__new__(cls, data)

    @classmethod
    def from_hex(cls, text: str) -> AccountAddress:
        """Parse hex text, padding short addresses with leading zeros."""
        if text.startswith(("0x", "0X")):
            text = text[2:]
        if len(text) % 2:
            text = "0" + text
        try:
            data = binascii.unhexlify(text)
        except (binascii.Error, UnicodeEncodeError) as exc:
            raise ValueError(f"invalid hex address: {exc}") from exc
        if len(data) > SUI_ADDRESS_LEN:
            raise ValueError("the len is invalid")
        return cls(data.rjust(SUI_ADDRESS_LEN, b"\x00"))

    def __str__(self) -> str:
        return "0x" + self.hex()

    def __repr__(self) -> str:
        return f"AccountAddress({str(self)!r})"

    def short_string(self) -> str:
        """Hex text with leading zero digits removed."""
        return "0x" + self.hex().lstrip("0")

    def to_bcs(self) -> bytes:
        """BCS form: the raw 32 bytes."""
        return bytes(self)

    def to_json(self) -> str:
        return str(self)

    @classmethod
    def from_json(cls, value: Any) -> AccountAddress:
        if value is None:
            raise ValueError("nil address")
        if not isinstance(value, str):
            raise TypeError(f"expected a JSON string, got {type(value).__name__}")
        return cls.from_hex(value)


class TypeTagKind(enum.IntEnum):
    """Kinds of Move type, valued by their BCS variant index."""

    BOOL = 0
    U8 = 1
    U64 = 2
    U128 = 3
    ADDRESS = 4
    SIGNER = 5
    VECTOR = 6
    STRUCT = 7
    U16 = 8
    U32 = 9
    U256 = 10


@dataclass(frozen=True)
class StructTag:
    """A fully qualified Move struct type with its type parameters."""

    address: AccountAddress
    module: Identifier
    name: Identifier
    type_params: list[TypeTag] = field(default_factory=list)


@dataclass(frozen=True)
class TypeTag:
    """A Move type; vectors carry their element type and structs their tag."""

    kind: TypeTagKind
    vector: Optional[TypeTag] = None
    struct: Optional[StructTag] = None

    def __post_init__(self) -> None:
        if (self.kind is TypeTagKind.VECTOR) != (self.vector is not None):
            raise ValueError("a vector type tag needs exactly an element type")
        if (self.kind is TypeTagKind.STRUCT) != (self.struct is not None):
            raise ValueError("a struct type tag needs exactly a struct tag")