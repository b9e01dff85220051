"""Typed calls to the read and transaction-building methods of a Sui full node.

Results are returned as the JSON the node sends back, apart from a few scalar
results that have an obvious Python type.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Union

from .jsonrpc import Client
from .methods import RpcMethod
from .move_types import AccountAddress

# The node's own page-size limit; requests above it are capped by the server.
QUERY_MAX_RESULT_LIMIT = 1000

SUI_COIN_TYPE = "0x2::sui::SUI"
DEVNET_NFT_TYPE = "0x2::devnet_nft::DevNetNFT"
DEFAULT_REQUEST_TYPE = "WaitForLocalExecution"

Address = Union[AccountAddress, str]
ObjectId = Union[AccountAddress, str]
JsonObject = dict[str, Any]


def _big(value: Union[int, str]) -> str:
    """Encode an unsigned 64-bit amount the way the node expects: a decimal string."""
    number = int(value)
    if not 0 <= number < 1 << 64:
        raise ValueError(f"amount out of u64 range: {number}")
    return str(number)


def _big_list(values: Iterable[Union[int, str]]) -> list[str]:
    return [_big(v) for v in values]


class SuiClient(Client):
    """A JSON-RPC client with one method per Sui node call."""

    def get_balance(self, owner: Address, coin_type: Optional[str] = None) -> JsonObject:
        """Balance of one coin type; the node uses SUI when ``coin_type`` is empty."""
        if not coin_type:
            return self.call(RpcMethod.GET_BALANCE, owner)
        return self.call(RpcMethod.GET_BALANCE, owner, coin_type)

    def get_all_balances(self, owner: Address) -> list[JsonObject]:
        return self.call(RpcMethod.GET_ALL_BALANCES, owner)

    def get_sui_coins_owned_by_address(self, address: Address) -> list[JsonObject]:
        """Up to 200 SUI coins owned by ``address``."""
        page = self.get_coins(address, SUI_COIN_TYPE, None, 200)
        return page.get("data") or []

    def get_coins(
        self,
        owner: Address,
        coin_type: Optional[str] = None,
        cursor: Optional[ObjectId] = None,
        limit: int = 0,
    ) -> JsonObject:
        """A page of coins; SUI when ``coin_type`` is None, from the start when ``cursor`` is None."""
        return self.call(RpcMethod.GET_COINS, owner, coin_type, cursor, limit)

    def get_all_coins(
        self, owner: Address, cursor: Optional[ObjectId] = None, limit: int = 0
    ) -> JsonObject:
        return self.call(RpcMethod.GET_ALL_COINS, owner, cursor, limit)

    def get_coin_metadata(self, coin_type: str) -> JsonObject:
        return self.call(RpcMethod.GET_COIN_METADATA, coin_type)

    def get_object(self, object_id: ObjectId, options: Optional[JsonObject] = None) -> JsonObject:
        return self.call(RpcMethod.GET_OBJECT, object_id, options)

    def multi_get_objects(
        self, object_ids: Iterable[ObjectId], options: Optional[JsonObject] = None
    ) -> list[JsonObject]:
        return self.call(RpcMethod.MULTI_GET_OBJECTS, list(object_ids), options)

    def get_owned_objects(
        self,
        address: Address,
        query: Optional[JsonObject] = None,
        cursor: Optional[JsonObject] = None,
        limit: Optional[int] = None,
    ) -> JsonObject:
        """A page of objects owned by ``address`` matching ``query``."""
        return self.call(RpcMethod.GET_OWNED_OBJECTS, address, query, cursor, limit)

    def get_total_supply(self, coin_type: str) -> JsonObject:
        return self.call(RpcMethod.GET_TOTAL_SUPPLY, coin_type)

    def get_total_transaction_blocks(self) -> str:
        return self.call(RpcMethod.GET_TOTAL_TRANSACTION_BLOCKS)

    def get_latest_checkpoint_sequence_number(self) -> str:
        return self.call(RpcMethod.GET_LATEST_CHECKPOINT_SEQUENCE_NUMBER)

    def batch_get_objects_owned_by_address(
        self, address: Address, options: JsonObject, filter_type: str = ""
    ) -> list[JsonObject]:
        """Objects owned by ``address``, only those of ``filter_type`` unless it is blank."""
        filter_type = filter_type.strip()
        return self.batch_get_filtered_objects_owned_by_address(
            address,
            options,
            lambda data: filter_type == "" or filter_type == data.get("type"),
        )

    def batch_get_filtered_objects_owned_by_address(
        self,
        address: Address,
        options: JsonObject,
        predicate: Optional[Callable[[JsonObject], bool]] = None,
    ) -> list[JsonObject]:
        """Objects owned by ``address`` whose data satisfies ``predicate``, fetched with ``options``."""
        query = {"options": {"showType": True}}
        page = self.get_owned_objects(address, query, None, None)
        object_ids = [
            obj["data"]["objectId"]
            for obj in page.get("data") or []
            if obj.get("data") is not None and (predicate is None or predicate(obj["data"]))
        ]
        return self.multi_get_objects(object_ids, options)

    def get_transaction_block(self, digest: Any, options: JsonObject) -> JsonObject:
        return self.call(RpcMethod.GET_TRANSACTION_BLOCK, digest, options)

    def get_reference_gas_price(self) -> int:
        return int(self.call(RpcMethod.GET_REFERENCE_GAS_PRICE))

    def get_events(self, digest: Any) -> list[JsonObject]:
        return self.call(RpcMethod.GET_EVENTS, digest)

    def try_get_past_object(
        self, object_id: ObjectId, version: int, options: Optional[JsonObject] = None
    ) -> JsonObject:
        return self.call(RpcMethod.TRY_GET_PAST_OBJECT, object_id, version, options)

    def dev_inspect_transaction_block(
        self,
        sender: Address,
        tx_bytes: bytes,
        gas_price: Optional[int] = None,
        epoch: Optional[int] = None,
    ) -> JsonObject:
        price = None if gas_price is None else _big(gas_price)
        return self.call(RpcMethod.DEV_INSPECT_TRANSACTION_BLOCK, sender, tx_bytes, price, epoch)

    def dry_run_transaction(self, tx_bytes: bytes) -> JsonObject:
        return self.call(RpcMethod.DRY_RUN_TRANSACTION_BLOCK, tx_bytes)

    def execute_transaction_block(
        self,
        tx_bytes: bytes,
        signatures: Iterable[Any],
        options: Optional[JsonObject] = None,
        request_type: str = DEFAULT_REQUEST_TYPE,
    ) -> JsonObject:
        return self.call(
            RpcMethod.EXECUTE_TRANSACTION_BLOCK, tx_bytes, list(signatures), options, request_type
        )

    def transfer_object(
        self,
        signer: Address,
        recipient: Address,
        object_id: ObjectId,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction moving a publicly transferable object."""
        return self.call(
            RpcMethod.TRANSFER_OBJECT, signer, object_id, gas, _big(gas_budget), recipient
        )

    def transfer_sui(
        self,
        signer: Address,
        recipient: Address,
        sui_object_id: ObjectId,
        amount: int,
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction sending SUI; the coin also pays for gas."""
        return self.call(
            RpcMethod.TRANSFER_SUI, signer, sui_object_id, _big(gas_budget), recipient, _big(amount)
        )

    def pay_all_sui(
        self,
        signer: Address,
        recipient: Address,
        input_coins: Iterable[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction sending every given SUI coin to one recipient."""
        return self.call(
            RpcMethod.PAY_ALL_SUI, signer, list(input_coins), recipient, _big(gas_budget)
        )

    def pay(
        self,
        signer: Address,
        input_coins: Iterable[ObjectId],
        recipients: Iterable[Address],
        amounts: Iterable[int],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        return self.call(
            RpcMethod.PAY,
            signer,
            list(input_coins),
            list(recipients),
            _big_list(amounts),
            gas,
            _big(gas_budget),
        )

    def pay_sui(
        self,
        signer: Address,
        input_coins: Iterable[ObjectId],
        recipients: Iterable[Address],
        amounts: Iterable[int],
        gas_budget: int,
    ) -> JsonObject:
        return self.call(
            RpcMethod.PAY_SUI,
            signer,
            list(input_coins),
            list(recipients),
            _big_list(amounts),
            _big(gas_budget),
        )

    def split_coin(
        self,
        signer: Address,
        coin: ObjectId,
        split_amounts: Iterable[int],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction splitting a coin into several."""
        return self.call(
            RpcMethod.SPLIT_COIN, signer, coin, _big_list(split_amounts), gas, _big(gas_budget)
        )

    def split_coin_equal(
        self,
        signer: Address,
        coin: ObjectId,
        split_count: int,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction splitting a coin into equal parts."""
        return self.call(
            RpcMethod.SPLIT_COIN_EQUAL, signer, coin, _big(split_count), gas, _big(gas_budget)
        )

    def merge_coins(
        self,
        signer: Address,
        primary_coin: ObjectId,
        coin_to_merge: ObjectId,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction merging one coin into another."""
        return self.call(
            RpcMethod.MERGE_COINS, signer, primary_coin, coin_to_merge, gas, _big(gas_budget)
        )

    def publish(
        self,
        sender: Address,
        compiled_modules: Iterable[bytes],
        dependencies: Iterable[ObjectId],
        gas: ObjectId,
        gas_budget: int,
    ) -> JsonObject:
        return self.call(
            RpcMethod.PUBLISH, sender, list(compiled_modules), list(dependencies), gas, int(gas_budget)
        )

    def move_call(
        self,
        signer: Address,
        package_id: ObjectId,
        module: str,
        function: str,
        type_args: Iterable[str],
        arguments: Iterable[Any],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction calling ``package_id::module::function``."""
        return self.call(
            RpcMethod.MOVE_CALL,
            signer,
            package_id,
            module,
            function,
            list(type_args),
            list(arguments),
            gas,
            _big(gas_budget),
        )

    def batch_transaction(
        self,
        signer: Address,
        txn_params: Iterable[JsonObject],
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        return self.call(
            RpcMethod.BATCH_TRANSACTION, signer, list(txn_params), gas, int(gas_budget)
        )

    def query_transaction_blocks(
        self,
        query: JsonObject,
        cursor: Any = None,
        limit: Optional[int] = None,
        descending_order: bool = False,
    ) -> JsonObject:
        return self.call(
            RpcMethod.QUERY_TRANSACTION_BLOCKS, query, cursor, limit, descending_order
        )

    def query_events(
        self,
        query: JsonObject,
        cursor: Optional[JsonObject] = None,
        limit: Optional[int] = None,
        descending_order: bool = False,
    ) -> JsonObject:
        return self.call(RpcMethod.QUERY_EVENTS, query, cursor, limit, descending_order)

    def resolve_name_service_address(self, sui_name: str) -> AccountAddress:
        """Address a SuiNS name points to; LookupError when the name is unknown."""
        result = self.call(RpcMethod.RESOLVE_NAME_SERVICE_ADDRESS, sui_name)
        if result is None:
            raise LookupError("sui name not found")
        return AccountAddress.from_json(result)

    def resolve_name_service_names(
        self, owner: Address, cursor: Optional[ObjectId] = None, limit: Optional[int] = None
    ) -> JsonObject:
        return self.call(RpcMethod.RESOLVE_NAME_SERVICE_NAMES, owner, cursor, limit)

    def get_dynamic_fields(
        self,
        parent_object_id: ObjectId,
        cursor: Optional[ObjectId] = None,
        limit: Optional[int] = None,
    ) -> JsonObject:
        return self.call(RpcMethod.GET_DYNAMIC_FIELDS, parent_object_id, cursor, limit)

    def get_dynamic_field_object(self, parent_object_id: ObjectId, name: JsonObject) -> JsonObject:
        """The object of a dynamic field; ``name`` holds its ``type`` and ``value``."""
        return self.call(RpcMethod.GET_DYNAMIC_FIELD_OBJECT, parent_object_id, name)

    def mint_nft(
        self,
        signer: Address,
        nft_name: str,
        nft_description: str,
        nft_uri: str,
        gas: Optional[ObjectId],
        gas_budget: int,
    ) -> JsonObject:
        """Build an unsigned transaction minting a devnet NFT."""
        package_id = AccountAddress.from_hex("0x2")
        return self.move_call(
            signer,
            package_id,
            "devnet_nft",
            "mint",
            [],
            [nft_name, nft_description, nft_uri],
            gas,
            gas_budget,
        )

    def get_nfts_owned_by_address(self, address: Address) -> list[JsonObject]:
        return self.batch_get_objects_owned_by_address(
            address,
            {"showType": True, "showContent": True, "showOwner": True},
            DEVNET_NFT_TYPE,
        )