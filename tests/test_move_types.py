import json

import pytest

from suirpc.move_types import AccountAddress, StructTag, TypeTag, TypeTagKind

FULL = "0x7e875ea78ee09f08d72e2676cf84e0f1c8ac61d94fa339cc8e37cace85bebc6e"


def test_from_hex_full_round_trip():
    addr = AccountAddress.from_hex(FULL)
    assert str(addr) == FULL
    assert len(addr) == 32


def test_from_hex_short_is_left_padded():
    addr = AccountAddress.from_hex("0x2")
    assert str(addr) == "0x" + "0" * 63 + "2"
    assert addr.short_string() == "0x2"


def test_odd_length_padding():
    addr = AccountAddress.from_hex("123")
    assert addr.short_string() == "0x123"
    assert AccountAddress.from_hex("0X0123") == addr


def test_too_long():
    with pytest.raises(ValueError, match="the len is invalid"):
        AccountAddress.from_hex("0x" + "11" * 33)


def test_invalid_hex():
    with pytest.raises(ValueError):
        AccountAddress.from_hex("0xgg")


def test_wrong_length_constructor():
    with pytest.raises(ValueError):
        AccountAddress(b"\x00" * 31)


def test_to_bcs_is_raw_bytes():
    addr = AccountAddress.from_hex(FULL)
    assert addr.to_bcs() == bytes.fromhex(FULL[2:])


def test_json_round_trip():
    addr = AccountAddress.from_hex(FULL)
    assert AccountAddress.from_json(json.loads(json.dumps(addr.to_json()))) == addr


def test_from_json_null():
    with pytest.raises(ValueError, match="nil address"):
        AccountAddress.from_json(None)


def test_from_json_not_string():
    with pytest.raises(TypeError):
        AccountAddress.from_json(5)


def test_vector_type_tag_requires_element():
    with pytest.raises(ValueError):
        TypeTag(TypeTagKind.VECTOR)
    with pytest.raises(ValueError):
        TypeTag(TypeTagKind.U8, vector=TypeTag(TypeTagKind.U8))


def test_struct_type_tag_requires_struct():
    with pytest.raises(ValueError):
        TypeTag(TypeTagKind.STRUCT)


def test_nested_type_tags():
    sui = StructTag(AccountAddress.from_hex("0x2"), "sui", "SUI")
    coin = StructTag(
        AccountAddress.from_hex("0x2"), "coin", "Coin", [TypeTag(TypeTagKind.STRUCT, struct=sui)]
    )
    tag = TypeTag(TypeTagKind.VECTOR, vector=TypeTag(TypeTagKind.STRUCT, struct=coin))
    assert tag.vector.struct.type_params[0].struct.name == "SUI"
    assert tag == TypeTag(TypeTagKind.VECTOR, vector=TypeTag(TypeTagKind.STRUCT, struct=coin))
    assert StructTag(AccountAddress.from_hex("0x1"), "m", "n").type_params == []