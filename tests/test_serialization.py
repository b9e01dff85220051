import json

import pytest

from suirpc.serialization import (
    Base58Data,
    Base64Data,
    HexData,
    b58decode,
    b58encode,
)

HEX_STR = "0x12333aabcc"


def test_hex_parse_and_str():
    hexdata = HexData.parse(HEX_STR)
    assert str(hexdata) == HEX_STR
    assert len(hexdata) == 5


def test_hex_to_base64_round_trip():
    hexdata = HexData.parse(HEX_STR)
    b64 = Base64Data(hexdata)
    assert Base64Data.parse(str(b64)) == hexdata


def test_json_round_trip():
    hexdata = HexData.parse(HEX_STR)
    encoded = json.dumps(hexdata.to_json())
    hexdata2 = HexData.from_json(json.loads(encoded))
    assert hexdata2 == hexdata

    base64data = Base64Data(hexdata)
    encoded_b = json.dumps(base64data.to_json())
    base64data2 = Base64Data.from_json(json.loads(encoded_b))
    assert base64data2 == base64data
    assert base64data2 == hexdata


def test_hex_upper_prefix_and_no_prefix():
    assert HexData.parse("0X12333AABCC") == HexData.parse(HEX_STR)
    assert HexData.parse("12333aabcc") == HexData.parse(HEX_STR)


@pytest.mark.parametrize("bad", ["0xzz", "abc", "0x1 2"])
def test_hex_parse_invalid(bad):
    with pytest.raises(ValueError):
        HexData.parse(bad)


def test_hex_short_string():
    assert HexData.parse("0x000a1b").short_string() == "0xa1b"
    assert HexData(b"\x00\x00").short_string() == "0x"


def test_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        HexData.from_json(12)
    with pytest.raises(TypeError):
        Base64Data.from_json(None)
    with pytest.raises(TypeError):
        Base58Data.from_json([1])


def test_base64_invalid():
    with pytest.raises(ValueError):
        Base64Data.parse("not base64!")


def test_b58_known_values():
    assert b58encode(b"hello world") == "StV1DL6CwTryKyV"
    assert b58encode(b"\x00\x00\x01") == "112"
    assert b58encode(b"") == ""


@pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x00\xff\x10", b"hello world", bytes(range(40))])
def test_b58_round_trip(data):
    assert b58decode(b58encode(data)) == data


def test_b58decode_invalid_raises():
    with pytest.raises(ValueError):
        b58decode("0OIl")


def test_base58_parse_invalid_gives_empty():
    assert Base58Data.parse("0OIl") == b""


def test_base58_json_round_trip():
    data = Base58Data(b"\x00\x01\x02abc")
    assert Base58Data.from_json(json.loads(json.dumps(data.to_json()))) == data
    assert str(Base58Data.parse(str(data))) == str(data)