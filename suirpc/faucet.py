"""Requesting test coins from a Sui network faucet."""

from __future__ import annotations

from typing import Any

import requests

from .move_types import AccountAddress

DEVNET_FAUCET_URL = "https://faucet.devnet.sui.io/gas"
TESTNET_FAUCET_URL = "https://faucet.testnet.sui.io/gas"


class FaucetError(Exception):
    """The faucet refused the request or answered with nothing to show for it."""


def faucet_fund_account(address: str, faucet_url: str = DEVNET_FAUCET_URL) -> str:
    """Ask the faucet to send gas coins to ``address``; return the transfer's digest.

    Raises ValueError when ``address`` is not a valid address and FaucetError
    when the faucet answers with an error or without a transfer.
    """
    AccountAddress.from_hex(address)

    payload = {"FixedAmountRequest": {"recipient": address}}
    resp = requests.post(
        faucet_url,
        json=payload,
        headers={"Content-Type": "application/json"},
    )
    if resp.status_code not in (200, 201):
        status = f"{resp.status_code} {resp.reason or ''}".rstrip()
        raise FaucetError(f"post {faucet_url} response code = {status}")

    response: Any = resp.json()
    if not isinstance(response, dict):
        raise FaucetError("faucet response is not an object")
    error = response.get("error") or ""
    if error.strip():
        raise FaucetError(error)
    transfers = response.get("transferredGasObjects") or []
    if not transfers:
        raise FaucetError("transaction not found")
    return transfers[0].get("transferTxDigest") or ""