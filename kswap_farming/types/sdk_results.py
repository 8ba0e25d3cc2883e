"""Dataclasses describing results returned by the read operations."""
from __future__ import annotations

from dataclasses import dataclass

from ..uint256 import ZERO, UInt256


@dataclass(slots=True)
class WhitelistedPool:
    pair_address: str
    weight: UInt256
    is_active: bool


@dataclass(slots=True)
class StakingPosition:
    staked_amount: UInt256
    earned_amount: UInt256
    total_staked_amount: UInt256
    reward_rate: UInt256
    period_finish: int
    pool_weight: UInt256
    total_weight: UInt256
    staking_contract_address: str
    liquidity_value: UInt256


@dataclass(slots=True)
class APRBreakdown:
    """Annual percentage yields for a pool.

    ``computed`` is ``False`` when the percentages are zero placeholders
    because liquidity and volume data are not fetched yet; a zero then means
    "unknown", not "no yield".
    """

    swap_fee_apr: float
    staking_apr: float
    combined_apr: float
    annual_rewards: UInt256 = ZERO
    pool_annual_rewards: UInt256 = ZERO
    computed: bool = True

    @classmethod
    def zero(cls) -> "APRBreakdown":
        return cls(swap_fee_apr=0.0, staking_apr=0.0, combined_apr=0.0)


@dataclass(slots=True)
class GasEstimate:
    gas_limit: int
    gas_price: int
