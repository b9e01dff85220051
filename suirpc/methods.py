"""Names of the JSON-RPC methods a Sui full node serves."""

from __future__ import annotations

import enum

SUIX_PREFIX = "suix_"
SUI_PREFIX = "sui_"
UNSAFE_PREFIX = "unsafe_"

ProtocolVersion = int

_PREFIXES = (SUIX_PREFIX, SUI_PREFIX, UNSAFE_PREFIX)


class RpcMethod(str, enum.Enum):
    """A JSON-RPC method; its value is the full name sent on the wire."""

    DEV_INSPECT_TRANSACTION_BLOCK = SUI_PREFIX + "devInspectTransactionBlock"
    DRY_RUN_TRANSACTION_BLOCK = SUI_PREFIX + "dryRunTransactionBlock"
    EXECUTE_TRANSACTION_BLOCK = SUI_PREFIX + "executeTransactionBlock"
    GET_CHECKPOINT = SUI_PREFIX + "getCheckpoint"
    GET_CHECKPOINTS = SUI_PREFIX + "getCheckpoints"
    GET_EVENTS = SUI_PREFIX + "getEvents"
    GET_LATEST_CHECKPOINT_SEQUENCE_NUMBER = SUI_PREFIX + "getLatestCheckpointSequenceNumber"
    GET_MOVE_FUNCTION_ARG_TYPES = SUI_PREFIX + "getMoveFunctionArgTypes"
    GET_NORMALIZED_MOVE_FUNCTION = SUI_PREFIX + "getNormalizedMoveFunction"
    GET_NORMALIZED_MOVE_MODULE = SUI_PREFIX + "getNormalizedMoveModule"
    GET_NORMALIZED_MOVE_MODULES_BY_PACKAGE = SUI_PREFIX + "getNormalizedMoveModulesByPackage"
    GET_NORMALIZED_MOVE_STRUCT = SUI_PREFIX + "getNormalizedMoveStruct"
    GET_OBJECT = SUI_PREFIX + "getObject"
    GET_TOTAL_TRANSACTION_BLOCKS = SUI_PREFIX + "getTotalTransactionBlocks"
    GET_TRANSACTION_BLOCK = SUI_PREFIX + "getTransactionBlock"
    MULTI_GET_OBJECTS = SUI_PREFIX + "multiGetObjects"
    MULTI_GET_TRANSACTION_BLOCKS = SUI_PREFIX + "multiGetTransactionBlocks"
    TRY_GET_PAST_OBJECT = SUI_PREFIX + "tryGetPastObject"
    TRY_MULTI_GET_PAST_OBJECTS = SUI_PREFIX + "tryMultiGetPastObjects"

    GET_ALL_BALANCES = SUIX_PREFIX + "getAllBalances"
    GET_ALL_COINS = SUIX_PREFIX + "getAllCoins"
    GET_BALANCE = SUIX_PREFIX + "getBalance"
    GET_COIN_METADATA = SUIX_PREFIX + "getCoinMetadata"
    GET_COINS = SUIX_PREFIX + "getCoins"
    GET_COMMITTEE_INFO = SUIX_PREFIX + "getCommitteeInfo"
    GET_CURRENT_EPOCH = SUIX_PREFIX + "getCurrentEpoch"
    GET_DYNAMIC_FIELD_OBJECT = SUIX_PREFIX + "getDynamicFieldObject"
    GET_DYNAMIC_FIELDS = SUIX_PREFIX + "getDynamicFields"
    GET_EPOCHS = SUIX_PREFIX + "getEpochs"
    GET_LATEST_SUI_SYSTEM_STATE = SUIX_PREFIX + "getLatestSuiSystemState"
    GET_MOVE_CALL_METRICS = SUIX_PREFIX + "getMoveCallMetrics"
    GET_NETWORK_METRICS = SUIX_PREFIX + "getNetworkMetrics"
    GET_OWNED_OBJECTS = SUIX_PREFIX + "getOwnedObjects"
    GET_REFERENCE_GAS_PRICE = SUIX_PREFIX + "getReferenceGasPrice"
    GET_STAKES = SUIX_PREFIX + "getStakes"
    GET_STAKES_BY_IDS = SUIX_PREFIX + "getStakesByIds"
    GET_TOTAL_SUPPLY = SUIX_PREFIX + "getTotalSupply"
    GET_VALIDATORS_APY = SUIX_PREFIX + "getValidatorsApy"
    QUERY_EVENTS = SUIX_PREFIX + "queryEvents"
    QUERY_OBJECTS = SUIX_PREFIX + "queryObjects"
    QUERY_TRANSACTION_BLOCKS = SUIX_PREFIX + "queryTransactionBlocks"
    RESOLVE_NAME_SERVICE_ADDRESS = SUIX_PREFIX + "resolveNameServiceAddress"
    RESOLVE_NAME_SERVICE_NAMES = SUIX_PREFIX + "resolveNameServiceNames"
    SUBSCRIBE_EVENT = SUIX_PREFIX + "subscribeEvent"

    BATCH_TRANSACTION = UNSAFE_PREFIX + "batchTransaction"
    MERGE_COINS = UNSAFE_PREFIX + "mergeCoins"
    MOVE_CALL = UNSAFE_PREFIX + "moveCall"
    PAY = UNSAFE_PREFIX + "pay"
    PAY_ALL_SUI = UNSAFE_PREFIX + "payAllSui"
    PAY_SUI = UNSAFE_PREFIX + "paySui"
    PUBLISH = UNSAFE_PREFIX + "publish"
    REQUEST_ADD_STAKE = UNSAFE_PREFIX + "requestAddStake"
    REQUEST_WITHDRAW_STAKE = UNSAFE_PREFIX + "requestWithdrawStake"
    SPLIT_COIN = UNSAFE_PREFIX + "splitCoin"
    SPLIT_COIN_EQUAL = UNSAFE_PREFIX + "splitCoinEqual"
    TRANSFER_OBJECT = UNSAFE_PREFIX + "transferObject"
    TRANSFER_SUI = UNSAFE_PREFIX + "transferSui"

    def __str__(self) -> str:
        return self.value

    @property
    def prefix(self) -> str:
        """The namespace prefix of the method name."""
        return next(p for p in _PREFIXES if self.value.startswith(p))

    @property
    def short_name(self) -> str:
        """The method name without its namespace prefix."""
        return self.value[len(self.prefix):]