"""Public entry point for the KalySwap farming SDK."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from .abis import (
    ERC20_APPROVE_ABI,
    LIQUIDITY_POOL_MANAGER_V2_ABI,
    STAKING_REWARDS_ABI,
    TREASURY_VESTER_ABI,
)
from .apr import AprCalculator
from .constants import (
    KALYCHAIN_CHAIN_ID,
    KALYCHAIN_RPC_URL,
    LIQUIDITY_POOL_MANAGER_V2_ADDRESS,
    PERMIT_DEADLINE_SECONDS,
    PERMIT_DOMAIN_NAME,
    PERMIT_DOMAIN_VERSION,
    RELAY_GAS_LIMIT,
    RELAY_GRAPHQL_PATH,
    TREASURY_VESTER_ADDRESS,
)
from .context import SigningContext
from .credentials import CredentialProvider, TerminalCredentialProvider
from .dispatcher import TransactionDispatcher, encode_call
from .errors import FarmingSDKError
from .gas import GasEstimator
from .http import HttpClient, HttpRequestor
from .permit import PermitSigner
from .provider import ProviderAccessor, ProviderFactory
from .registry import PoolRegistry
from .relay import RelayClient
from .signers import CustodialSigner, ExternalSigner, Signer, WalletCapability
from .types.sdk_results import APRBreakdown, StakingPosition, WhitelistedPool
from .validation import validate_address, validate_amount

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FarmingOptions:
    rpc_url: str = KALYCHAIN_RPC_URL
    chain_id: int = KALYCHAIN_CHAIN_ID
    liquidity_pool_manager_address: str = LIQUIDITY_POOL_MANAGER_V2_ADDRESS
    treasury_vester_address: str = TREASURY_VESTER_ADDRESS
    pair_addresses: List[str] = field(default_factory=list)
    relay_base_url: str = "http://localhost:3000"
    relay_graphql_path: str = RELAY_GRAPHQL_PATH
    relay_gas_limit: int = RELAY_GAS_LIMIT
    permit_domain_name: str = PERMIT_DOMAIN_NAME
    permit_domain_version: str = PERMIT_DOMAIN_VERSION
    permit_deadline_seconds: int = PERMIT_DEADLINE_SECONDS
    http_requestor: Optional[HttpRequestor] = None

    @classmethod
    def from_env(cls) -> "FarmingOptions":
        """Options from the environment, after loading a ``.env`` file if present."""

        load_dotenv()
        defaults = cls()
        pairs = os.getenv("FARMING_PAIR_ADDRESSES", "")
        return cls(
            rpc_url=os.getenv("KALYCHAIN_RPC_URL") or os.getenv("RPC_URL") or defaults.rpc_url,
            chain_id=int(os.getenv("FARMING_CHAIN_ID", defaults.chain_id)),
            liquidity_pool_manager_address=os.getenv(
                "FARMING_POOL_MANAGER_ADDRESS", defaults.liquidity_pool_manager_address
            ),
            treasury_vester_address=os.getenv(
                "FARMING_TREASURY_VESTER_ADDRESS", defaults.treasury_vester_address
            ),
            pair_addresses=[pair.strip() for pair in pairs.split(",") if pair.strip()],
            relay_base_url=os.getenv("FARMING_RELAY_URL", defaults.relay_base_url),
            relay_gas_limit=int(os.getenv("FARMING_RELAY_GAS_LIMIT", defaults.relay_gas_limit)),
            permit_domain_name=os.getenv("FARMING_PERMIT_DOMAIN_NAME", defaults.permit_domain_name),
        )


class Farming:
    """Main entry point: pool reads, yield estimates and staking writes.

    Reads never raise; they return ``None`` (or an empty list) when the chain
    cannot answer. Writes return the submitted transaction hash and raise
    :class:`FarmingSDKError` (or the underlying transport error) on failure.
    """

    def __init__(
        self,
        options: Optional[FarmingOptions] = None,
        *,
        context: Optional[SigningContext] = None,
        wallet: Optional[WalletCapability] = None,
        credentials: Optional[CredentialProvider] = None,
        provider_factory: Optional[ProviderFactory] = None,
        signer: Optional[Signer] = None,
    ) -> None:
        self.options = options or FarmingOptions()
        self.context = context or SigningContext.external()
        self.provider_factory = provider_factory or ProviderAccessor(self.options.rpc_url)

        self._http_client = HttpClient(self.options.http_requestor)
        self.relay = RelayClient(
            self.options.relay_base_url,
            self._http_client,
            graphql_path=self.options.relay_graphql_path,
            gas_limit=self.options.relay_gas_limit,
        )

        self.registry = PoolRegistry(self.provider_factory, self.options.liquidity_pool_manager_address)
        self.apr = AprCalculator(self.provider_factory, self.registry, self.options.treasury_vester_address)
        self.gas = GasEstimator(self.provider_factory)

        self.external_signer = ExternalSigner(wallet)
        if signer is None:
            if self.context.is_custodial:
                signer = CustodialSigner(
                    self.context, self.relay, credentials or TerminalCredentialProvider()
                )
            else:
                signer = self.external_signer
        self.dispatcher = TransactionDispatcher(signer)

        self.permit = PermitSigner(
            self.provider_factory,
            self.external_signer,
            chain_id=self.options.chain_id,
            domain_name=self.options.permit_domain_name,
            domain_version=self.options.permit_domain_version,
            deadline_seconds=self.options.permit_deadline_seconds,
        )

    # Reads

    async def get_whitelisted_pools(
        self, pair_addresses: Optional[Sequence[str]] = None
    ) -> List[WhitelistedPool]:
        candidates = list(pair_addresses if pair_addresses is not None else self.options.pair_addresses)
        try:
            return await self.registry.list_whitelisted_pools(candidates)
        except Exception:
            logger.warning("Error fetching whitelisted pools", exc_info=True)
            return []

    async def get_staking_info(
        self, pair_address: str, user_address: Optional[str] = None
    ) -> Optional[StakingPosition]:
        return await self.registry.resolve_staking_info(pair_address, user_address)

    async def get_pool_apr(self, pair_address: str) -> Optional[APRBreakdown]:
        return await self.apr.try_compute_apr(pair_address)

    # Writes

    async def approve_lp_tokens(self, lp_token_address: str, spender_address: str, amount: int) -> str:
        spender = validate_address(spender_address, "spender_address")
        value = validate_amount(amount)
        return await self.dispatcher.dispatch(lp_token_address, "approve", [spender, value], 0, ERC20_APPROVE_ABI)

    async def stake_lp_tokens(self, staking_address: str, amount: int) -> str:
        value = validate_amount(amount)
        return await self.dispatcher.dispatch(staking_address, "stake", [value], 0, STAKING_REWARDS_ABI)

    async def approve_and_stake(self, lp_token_address: str, staking_address: str, amount: int) -> str:
        """Approve the staking contract for ``amount``, then stake it.

        The stake is only attempted once the approval has been submitted; an
        approval failure is raised and nothing else is sent.
        """

        approval_hash = await self.approve_lp_tokens(lp_token_address, staking_address, amount)
        logger.info("Approval submitted: %s", approval_hash)
        return await self.stake_lp_tokens(staking_address, amount)

    async def stake_lp_tokens_with_permit(
        self, staking_address: str, lp_token_address: str, amount: int
    ) -> str:
        if self.context.is_custodial:
            raise FarmingSDKError.permit_unsupported_error(self.context.backend.value)
        return await self.permit.stake_with_permit(staking_address, lp_token_address, amount)

    async def unstake_lp_tokens(self, staking_address: str, amount: int) -> str:
        value = validate_amount(amount)
        return await self.dispatcher.dispatch(staking_address, "withdraw", [value], 0, STAKING_REWARDS_ABI)

    async def claim_rewards(self, staking_address: str) -> str:
        return await self.dispatcher.dispatch(staking_address, "getReward", [], 0, STAKING_REWARDS_ABI)

    async def exit(self, staking_address: str) -> str:
        return await self.dispatcher.dispatch(staking_address, "exit", [], 0, STAKING_REWARDS_ABI)

    async def claim_vested_rewards(self) -> str:
        return await self.dispatcher.dispatch(
            self.options.treasury_vester_address, "claim", [], 0, TREASURY_VESTER_ABI
        )

    async def calculate_and_distribute(self) -> str:
        manager = validate_address(self.options.liquidity_pool_manager_address, "manager_address")
        estimate = None
        # The relay applies its own gas ceiling.
        if not self.context.is_custodial:
            data = encode_call(manager, "calculateAndDistribute", [], LIQUIDITY_POOL_MANAGER_V2_ABI)
            estimate = await self.gas.estimate(manager, data, from_address=self.context.wallet_address)
        return await self.dispatcher.dispatch(
            manager, "calculateAndDistribute", [], 0, LIQUIDITY_POOL_MANAGER_V2_ABI, gas=estimate
        )
