"""Sui JSON-RPC client with hex, base64, base58, address, tagged-JSON and Ed25519 helpers."""

__version__ = "0.1.0"

__all__ = [
    "serialization",
    "tagjson",
    "move_types",
    "keys",
    "methods",
    "jsonrpc",
    "api",
    "staking",
    "faucet",
]