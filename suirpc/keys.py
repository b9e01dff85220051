"""Ed25519 key pairs."""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

SEED_SIZE = 32
PRIVATE_KEY_SIZE = 64


class Ed25519KeyPair:
    """An Ed25519 signing key with its public key.

    ``private_key`` is the 64-byte form: the 32-byte seed followed by the public key.
    """

    def __init__(self, private_key: bytes) -> None:
        private_key = bytes(private_key)
        if len(private_key) not in (SEED_SIZE, PRIVATE_KEY_SIZE):
            raise ValueError(
                f"an Ed25519 private key is {SEED_SIZE} or {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
            )
        seed = private_key[:SEED_SIZE]
        self._signing_key = Ed25519PrivateKey.from_private_bytes(seed)
        self.public_key: bytes = self._signing_key.public_key().public_bytes(
            Encoding.Raw, PublicFormat.Raw
        )
        if len(private_key) == PRIVATE_KEY_SIZE and private_key[SEED_SIZE:] != self.public_key:
            raise ValueError("the private key's public half does not match its seed")
        self.private_key: bytes = seed + self.public_key

    def sign(self, msg: bytes) -> bytes:
        """Return the 64-byte signature of ``msg``."""
        return self._signing_key.sign(bytes(msg))

    def verify(self, signature: bytes, msg: bytes) -> bool:
        """Check a signature made by this key pair."""
        try:
            Ed25519PublicKey.from_public_bytes(self.public_key).verify(bytes(signature), bytes(msg))
        except InvalidSignature:
            return False
        return True