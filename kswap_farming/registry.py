"""Pool registry reads against LiquidityPoolManagerV2."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from .abis import LIQUIDITY_POOL_MANAGER_V2_ABI
from .constants import LIQUIDITY_POOL_MANAGER_V2_ADDRESS, TOTAL_WEIGHT
from .provider import ProviderFactory, contract
from .settle import settle
from .staking import StakingContractReader
from .types.sdk_results import StakingPosition, WhitelistedPool
from .uint256 import ZERO, UInt256
from .validation import is_empty_address, validate_address

logger = logging.getLogger(__name__)


class PoolRegistry:
    def __init__(
        self,
        provider_factory: ProviderFactory,
        manager_address: str = LIQUIDITY_POOL_MANAGER_V2_ADDRESS,
        staking_reader: Optional[StakingContractReader] = None,
    ) -> None:
        self._provider_factory = provider_factory
        self._manager_address = validate_address(manager_address, "manager_address")
        self._staking_reader = staking_reader or StakingContractReader(provider_factory)

    def manager_contract(self) -> Any:
        return contract(self._provider_factory(), self._manager_address, LIQUIDITY_POOL_MANAGER_V2_ABI)

    async def list_whitelisted_pools(self, pair_addresses: Sequence[str]) -> List[WhitelistedPool]:
        """Check every candidate pair; pairs whose lookup fails are skipped.

        An unreachable registry makes every lookup fail, so the result is an
        empty list rather than an error.
        """

        try:
            manager = self.manager_contract()
        except Exception:
            logger.warning("Pool registry %s is unreachable", self._manager_address, exc_info=True)
            return []
        results = await asyncio.gather(
            *(self._check_pair(manager, pair) for pair in pair_addresses),
            return_exceptions=True,
        )

        pools: List[WhitelistedPool] = []
        for pair, result in zip(pair_addresses, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning("Error checking pair %s: %s", pair, result)
                continue
            if result is not None:
                pools.append(result)

        logger.info("Found %d whitelisted pools out of %d candidates", len(pools), len(pair_addresses))
        return pools

    async def _check_pair(self, manager: Any, pair_address: str) -> Optional[WhitelistedPool]:
        pair = validate_address(pair_address, "pair_address")
        is_whitelisted, weight = await asyncio.gather(
            manager.functions.isWhitelisted(pair).call(),
            manager.functions.weights(pair).call(),
        )
        if not is_whitelisted:
            logger.debug("Pair %s is not whitelisted", pair)
            return None

        weight = UInt256(weight)
        return WhitelistedPool(pair_address=pair, weight=weight, is_active=weight > 0)

    async def resolve_staking_info(
        self, pair_address: str, user_address: Optional[str] = None
    ) -> Optional[StakingPosition]:
        """Staking position for a whitelisted pair, or ``None`` when unavailable.

        Individual lookups that fail fall back to their defaults. Any other
        error is logged and reported as ``None``; nothing is raised.
        """

        try:
            return await self._resolve_staking_info(pair_address, user_address)
        except Exception:
            logger.warning("Error fetching staking info for %s", pair_address, exc_info=True)
            return None

    async def _resolve_staking_info(
        self, pair_address: str, user_address: Optional[str]
    ) -> Optional[StakingPosition]:
        pair = validate_address(pair_address, "pair_address")
        user = validate_address(user_address, "user_address") if user_address else None

        functions = self.manager_contract().functions
        is_whitelisted, pool_weight, liquidity, staking_address = await settle(
            (lambda: functions.isWhitelisted(pair).call(), False),
            (lambda: functions.weights(pair).call(), ZERO),
            (lambda: functions.getKlcLiquidity(pair).call(), ZERO),
            (lambda: functions.stakes(pair).call(), ""),
            labels=["isWhitelisted", "weights", "getKlcLiquidity", "stakes"],
        )

        if not is_whitelisted:
            logger.info("Pool %s is not whitelisted", pair)
            return None

        if is_empty_address(staking_address):
            logger.info("No staking contract found for %s", pair)
            return None

        snapshot = await self._staking_reader.read(staking_address, user)

        return StakingPosition(
            staked_amount=snapshot.staked_amount,
            earned_amount=snapshot.earned_amount,
            total_staked_amount=snapshot.total_supply,
            reward_rate=snapshot.reward_rate,
            period_finish=snapshot.period_finish,
            pool_weight=UInt256(pool_weight),
            total_weight=UInt256(TOTAL_WEIGHT),
            staking_contract_address=validate_address(staking_address, "staking_address"),
            liquidity_value=UInt256(liquidity),
        )
