"""Reads against a per-pool StakingRewards contract."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .abis import STAKING_REWARDS_ABI
from .provider import ProviderFactory, contract
from .settle import resolved, settle
from .uint256 import ZERO, UInt256


@dataclass(slots=True)
class StakingSnapshot:
    total_supply: UInt256
    reward_rate: UInt256
    period_finish: int
    staked_amount: UInt256
    earned_amount: UInt256


class StakingContractReader:
    """Queries one resolved staking contract.

    The provider factory is called once per read so no connection outlives
    the operation that needed it.
    """

    def __init__(self, provider_factory: ProviderFactory) -> None:
        self._provider_factory = provider_factory

    def _contract(self, staking_address: str) -> Any:
        return contract(self._provider_factory(), staking_address, STAKING_REWARDS_ABI)

    async def read(self, staking_address: str, user_address: Optional[str] = None) -> StakingSnapshot:
        staking = self._contract(staking_address)
        functions = staking.functions

        labels = ["totalSupply", "rewardRate", "periodFinish", "balanceOf", "earned"]
        total_supply, reward_rate, period_finish, staked, earned = await settle(
            (lambda: functions.totalSupply().call(), ZERO),
            (lambda: functions.rewardRate().call(), ZERO),
            (lambda: functions.periodFinish().call(), 0),
            (lambda: functions.balanceOf(user_address).call() if user_address else resolved(ZERO), ZERO),
            (lambda: functions.earned(user_address).call() if user_address else resolved(ZERO), ZERO),
            labels=labels,
        )

        return StakingSnapshot(
            total_supply=UInt256(total_supply),
            reward_rate=UInt256(reward_rate),
            period_finish=int(period_finish),
            staked_amount=UInt256(staked),
            earned_amount=UInt256(earned),
        )
