"""Yield estimation from the treasury vesting schedule."""
from __future__ import annotations

import logging
from typing import Any, Optional

from .abis import TREASURY_VESTER_ABI
from .constants import SECONDS_PER_YEAR, TREASURY_VESTER_ADDRESS
from .provider import ProviderFactory, contract
from .registry import PoolRegistry
from .settle import settle
from .types.sdk_results import APRBreakdown
from .uint256 import ZERO, UInt256
from .validation import validate_address

logger = logging.getLogger(__name__)


def annual_emission(vesting_amount: int, halving_period: int) -> UInt256:
    if halving_period == 0:
        return ZERO
    return UInt256(vesting_amount) * SECONDS_PER_YEAR // halving_period


class AprCalculator:
    def __init__(
        self,
        provider_factory: ProviderFactory,
        registry: PoolRegistry,
        vester_address: str = TREASURY_VESTER_ADDRESS,
    ) -> None:
        self._provider_factory = provider_factory
        self._registry = registry
        self._vester_address = validate_address(vester_address, "vester_address")

    def vester_contract(self) -> Any:
        return contract(self._provider_factory(), self._vester_address, TREASURY_VESTER_ABI)

    async def compute_apr(self, pair_address: str) -> APRBreakdown:
        pair = validate_address(pair_address, "pair_address")
        manager = self._registry.manager_contract().functions
        vester = self.vester_contract().functions

        (
            pool_weight,
            num_pools,
            is_whitelisted,
            vesting_amount,
            halving_period,
            vesting_enabled,
        ) = await settle(
            (lambda: manager.weights(pair).call(), ZERO),
            (lambda: manager.numPools().call(), UInt256(1)),
            (lambda: manager.isWhitelisted(pair).call(), False),
            (lambda: vester.vestingAmount().call(), ZERO),
            (lambda: vester.halvingPeriod().call(), 0),
            (lambda: vester.vestingEnabled().call(), False),
            labels=["weights", "numPools", "isWhitelisted", "vestingAmount", "halvingPeriod", "vestingEnabled"],
        )

        if not is_whitelisted or not vesting_enabled or pool_weight == 0:
            return APRBreakdown.zero()

        annual_rewards = annual_emission(vesting_amount, int(halving_period))
        pool_annual_rewards = annual_rewards // num_pools if num_pools > 0 else ZERO

        # Both terms need pair reserves and trading volume, which are not read
        # yet; they are reported as zero with computed=False.
        staking_apr = 0.0
        swap_fee_apr = 0.0
        logger.debug(
            "Pool %s: annual rewards %s, pool share %s", pair, annual_rewards, pool_annual_rewards
        )

        return APRBreakdown(
            swap_fee_apr=swap_fee_apr,
            staking_apr=staking_apr,
            combined_apr=staking_apr + swap_fee_apr,
            annual_rewards=annual_rewards,
            pool_annual_rewards=pool_annual_rewards,
            computed=False,
        )

    async def try_compute_apr(self, pair_address: str) -> Optional[APRBreakdown]:
        try:
            return await self.compute_apr(pair_address)
        except Exception:
            logger.warning("APR calculation failed for %s", pair_address, exc_info=True)
            return None
