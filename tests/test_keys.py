import pytest

from suirpc.keys import Ed25519KeyPair

# RFC 8032, section 7.1, test 1
SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


def test_rfc8032_vector():
    pair = Ed25519KeyPair(SEED)
    assert pair.public_key == PUBLIC
    assert pair.sign(b"") == SIGNATURE


def test_private_key_is_seed_plus_public():
    pair = Ed25519KeyPair(SEED)
    assert pair.private_key == SEED + pair.public_key
    assert len(pair.private_key) == 64


def test_full_private_key_matches_seed():
    from_seed = Ed25519KeyPair(SEED)
    from_full = Ed25519KeyPair(from_seed.private_key)
    assert from_full.public_key == from_seed.public_key
    assert from_full.sign(b"msg") == from_seed.sign(b"msg")


def test_sign_verify_round_trip():
    pair = Ed25519KeyPair(bytes(range(32)))
    sig = pair.sign(b"some message")
    assert pair.verify(sig, b"some message") is True
    assert pair.verify(sig, b"other message") is False


def test_verify_rejects_other_key():
    signer = Ed25519KeyPair(bytes(range(32)))
    other = Ed25519KeyPair(bytes(range(1, 33)))
    assert other.verify(signer.sign(b"x"), b"x") is False


@pytest.mark.parametrize("size", [0, 31, 33, 63, 65])
def test_bad_length(size):
    with pytest.raises(ValueError):
        Ed25519KeyPair(b"\x01" * size)


def test_mismatched_public_half():
    with pytest.raises(ValueError):
        Ed25519KeyPair(SEED + b"\x00" * 32)