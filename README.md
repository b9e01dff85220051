# suirpc

A small Python client for the Sui JSON-RPC API. It also has the encoding helpers
that the API uses: hex, base64 and base58 byte strings, Move account addresses,
tagged JSON enums and Ed25519 key pairs.

## Installation

```
pip install suirpc
```

To work on the package and run its tests:

```
pip install -e ".[test]"
pytest
```

## Modules

- `suirpc.serialization`: the `bytes` subclasses `HexData`, `Base64Data` and
  `Base58Data`. Each one has `parse(text)`, `to_json()` and `from_json(value)`.
  Calling `str()` on one gives its text form. `HexData.parse` accepts an
  optional `0x` or `0X` prefix. `HexData.short_string()` removes leading zero
  digits. `Base58Data.parse` returns empty data when the text contains a
  character outside the alphabet. The functions `b58encode` and `b58decode` use
  the Bitcoin alphabet. `b58decode` raises `ValueError` on a bad character.
- `suirpc.tagjson`: `decode_tag_json(data, variants, tag, content)` decodes a
  JSON enum and returns a dict of the variants it sets. The input can be a bare
  string that names unit variants, an object keyed by variant name, or an
  object tagged by a field, with an optional content field. Input that fits
  none of these raises `TagJsonError`, a subclass of `ValueError`.
- `suirpc.move_types`: `AccountAddress` is a 32-byte `bytes` subclass.
  `AccountAddress.from_hex` left-pads short hex such as `"0x2"` with zeros. An
  address also has `short_string()`, `to_bcs()` (the raw 32 bytes), `to_json()`
  and `from_json()`. `from_json(None)` raises `ValueError("nil address")`. The
  module also has `TypeTagKind`, an `IntEnum` whose values are the BCS variant
  indexes, and the frozen dataclasses `TypeTag` and `StructTag`.
- `suirpc.keys`: `Ed25519KeyPair(private_key)` takes a 32-byte seed or the
  64-byte form, which is the seed followed by the public key. It has the
  attributes `public_key` and `private_key` and the methods `sign(msg)` and
  `verify(signature, msg)`.
- `suirpc.methods`: `RpcMethod`, a string enum of the node's method names with
  their `sui_`, `suix_` and `unsafe_` prefixes. Each member has `prefix` and
  `short_name` properties.
- `suirpc.jsonrpc`: the JSON-RPC 2.0 transport over HTTP POST.
  - `Client(rpc_url, session=None, timeout=30.0)` and `dial(rpc_url)` create a
    client.
  - `Client.call(method, *args)` returns the result of one call.
    `Client.batch_call(elems)` sends a list of `BatchElem` in one request. It
    fills in each element's `result`, or its `error`. An element's optional
    `decoder` converts the raw result.
  - A client is a context manager, and `close()` closes its session.
  - Errors: `JsonRpcError` for an error object from the server, `HTTPError` for
    a status outside 2xx, and `NoResultError` for a response that has no result.
  - Arguments are JSON-encoded through their `to_json()` method where they have
    one. Enums are sent as their values and raw bytes as base64.
- `suirpc.api`: `SuiClient`, a `Client` subclass with one method for each node
  call. The calls cover balances, coins, coin metadata and supply, objects,
  owned objects, transactions, events, checkpoints, the reference gas price,
  dry runs, dev-inspect and execution. They also cover the `unsafe_`
  transaction builders (transfer, pay, split, merge, publish, move call,
  batch), name-service lookups, dynamic fields, and the devnet NFT helpers
  `mint_nft` and `get_nfts_owned_by_address`. Amounts are checked to be within
  the unsigned 64-bit range and sent as decimal strings.
  `resolve_name_service_address` returns an `AccountAddress`, or raises
  `LookupError` when the name is unknown.
- `suirpc.staking`: `StakingClient`, a `SuiClient` subclass with these calls:
  `get_latest_sui_system_state`, `get_validators_apy`, `get_stakes`,
  `get_stakes_by_ids`, `request_add_stake` and `request_withdraw_stake`.
- `suirpc.faucet`: `faucet_fund_account(address, faucet_url)` asks a faucet for
  gas coins and returns the digest of the transfer. `faucet_url` defaults to
  `DEVNET_FAUCET_URL`, and `TESTNET_FAUCET_URL` is also provided. An invalid
  address raises `ValueError`. A refusal or an empty answer raises
  `FaucetError`.

## Example

```python
from suirpc.api import SuiClient
from suirpc.move_types import AccountAddress

with SuiClient("http://localhost:9000") as client:
    owner = AccountAddress.from_hex("0x2")
    balance = client.get_balance(owner)
    coins = client.get_coins(owner, limit=10)
```

## What it does not do

- Results come back as the JSON the node sends: dicts and lists. The only
  exceptions are `get_reference_gas_price`, which returns an `int`, and
  `resolve_name_service_address`, which returns an `AccountAddress`.
- It does not build or BCS-encode transactions locally. Unsigned transactions
  come from the node's `unsafe_` calls.
- It has no accounts or wallets. It does not derive keys from mnemonics,
  compute addresses from public keys, or sign intent messages. `Ed25519KeyPair`
  signs raw bytes only.
- It has no command-line interface.