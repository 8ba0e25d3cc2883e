"""Gas estimation for directly signed submissions."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from web3 import AsyncWeb3

from .constants import GAS_LIMIT_BUFFER
from .provider import ProviderFactory
from .types.sdk_results import GasEstimate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GasEstimator:
    provider_factory: ProviderFactory
    buffer: float = GAS_LIMIT_BUFFER

    async def estimate(
        self, to_address: str, data: str, from_address: Optional[str] = None, value: int = 0
    ) -> GasEstimate:
        provider = self.provider_factory()
        tx = {"to": AsyncWeb3.to_checksum_address(to_address), "data": data, "value": int(value)}
        if from_address:
            tx["from"] = AsyncWeb3.to_checksum_address(from_address)

        gas_estimate, gas_price = await asyncio.gather(
            provider.eth.estimate_gas(tx),
            provider.eth.gas_price,
        )
        gas_limit = int(gas_estimate * self.buffer)
        logger.debug("Estimated gas for %s: limit=%s price=%s", to_address, gas_limit, gas_price)
        return GasEstimate(gas_limit=gas_limit, gas_price=int(gas_price))
