"""Staking calls: system state, validator yields, stakes and stake requests."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .api import Address, JsonObject, ObjectId, SuiClient
from .methods import RpcMethod

Amount = Union[int, str]


def _big_int(value: Amount) -> str:
    """Encode an arbitrary-size integer as the decimal string the node expects."""
    return str(int(value))


class StakingClient(SuiClient):
    """A Sui client with the staking calls added."""

    def get_latest_sui_system_state(self) -> JsonObject:
        """Summary of the current Sui system state object."""
        return self.call(RpcMethod.GET_LATEST_SUI_SYSTEM_STATE)

    def get_validators_apy(self) -> JsonObject:
        """Yearly yield of every active validator, with the epoch it was computed for."""
        return self.call(RpcMethod.GET_VALIDATORS_APY)

    def get_stakes(self, owner: Address) -> list[JsonObject]:
        """Stakes owned by ``owner``, grouped by validator."""
        return self.call(RpcMethod.GET_STAKES, owner)

    def get_stakes_by_ids(self, staked_sui_ids: Iterable[ObjectId]) -> list[JsonObject]:
        """Stakes with the given StakedSui object ids, grouped by validator."""
        return self.call(RpcMethod.GET_STAKES_BY_IDS, list(staked_sui_ids))

    def request_add_stake(
        self,
        signer: Address,
        coins: Iterable[ObjectId],
        amount: Amount,
        validator: Address,
        gas: Optional[ObjectId],
        gas_budget: Amount,
    ) -> JsonObject:
        """Build an unsigned transaction staking ``amount`` from ``coins`` with ``validator``."""
        return self.call(
            RpcMethod.REQUEST_ADD_STAKE,
            signer,
            list(coins),
            _big_int(amount),
            validator,
            gas,
            _big_int(gas_budget),
        )

    def request_withdraw_stake(
        self,
        signer: Address,
        staked_sui_id: ObjectId,
        gas: Optional[ObjectId],
        gas_budget: Amount,
    ) -> JsonObject:
        """Build an unsigned transaction withdrawing the stake held in ``staked_sui_id``."""
        return self.call(
            RpcMethod.REQUEST_WITHDRAW_STAKE,
            signer,
            staked_sui_id,
            gas,
            _big_int(gas_budget),
        )