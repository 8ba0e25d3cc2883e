"""Signer interfaces used by the SDK."""
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from eth_account import Account
from eth_account.messages import encode_typed_data
from web3 import AsyncWeb3, Web3

from .context import SigningContext
from .credentials import DEFAULT_PROMPT, CredentialProvider
from .errors import FarmingSDKError
from .gas import GasEstimator
from .provider import ProviderFactory
from .relay import RelayClient
from .types.transactions import TransactionRequest

logger = logging.getLogger(__name__)


class Signer(Protocol):
    async def submit(self, request: TransactionRequest) -> str:
        ...


class WalletCapability(Protocol):
    """A self-custodied wallet: signs and broadcasts on its own."""

    async def get_address(self) -> str:
        ...

    async def sign_typed_data(self, typed_data: Dict[str, Any]) -> str:
        ...

    async def send_transaction(self, tx: Dict[str, Any]) -> str:
        ...


@dataclass
class CustodialSigner(Signer):
    """Submits through the relay, which holds the wallet key."""

    context: SigningContext
    relay: RelayClient
    credentials: CredentialProvider
    prompt: str = DEFAULT_PROMPT

    async def submit(self, request: TransactionRequest) -> str:
        if not self.context.wallet_id:
            raise FarmingSDKError.authentication_required_error("No internal wallet connected")

        password = self.credentials.request_secret(self.prompt)
        if not password:
            raise FarmingSDKError.credential_required_error()

        if not self.context.auth_token:
            raise FarmingSDKError.authentication_required_error("Authentication required")

        logger.info(
            "Submitting %s on %s through relay for wallet %s",
            request.function_name,
            request.target_address,
            self.context.wallet_id,
        )
        return await asyncio.to_thread(
            self.relay.send_contract_transaction,
            wallet_id=self.context.wallet_id,
            to_address=request.target_address,
            data=request.data,
            value=request.native_value,
            password=password,
            chain_id=self.context.chain_id,
            auth_token=self.context.auth_token,
        )


@dataclass
class ExternalSigner(Signer):
    """Hands the raw ``{to, data, value}`` envelope to the user's wallet."""

    wallet: Optional[WalletCapability]

    def require_wallet(self) -> WalletCapability:
        if self.wallet is None:
            raise FarmingSDKError.no_wallet_error()
        return self.wallet

    async def submit(self, request: TransactionRequest) -> str:
        wallet = self.require_wallet()
        logger.info("Submitting %s on %s through external wallet", request.function_name, request.target_address)
        return await wallet.send_transaction(request.to_envelope())


@dataclass
class LocalAccountWallet(WalletCapability):
    """Wallet backed by a private key held in process."""

    private_key: str
    provider_factory: ProviderFactory
    chain_id: int
    gas_estimator: Optional[GasEstimator] = None
    _account: Any = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            self._account = Account.from_key(self.private_key)
        except ValueError as exc:
            raise ValueError("Private key must be a 32 byte hexadecimal string") from exc
        if self.gas_estimator is None:
            self.gas_estimator = GasEstimator(self.provider_factory)

    @property
    def address(self) -> str:
        return self._account.address

    async def get_address(self) -> str:
        return self.address

    async def sign_typed_data(self, typed_data: Dict[str, Any]) -> str:
        signable = encode_typed_data(full_message=typed_data)
        signed = self._account.sign_message(signable)
        return Web3.to_hex(signed.signature)

    async def send_transaction(self, tx: Dict[str, Any]) -> str:
        provider = self.provider_factory()
        prepared: Dict[str, Any] = {
            "to": AsyncWeb3.to_checksum_address(tx["to"]),
            "data": tx.get("data", "0x"),
            "value": int(tx.get("value", 0)),
            "chainId": self.chain_id,
            "nonce": await provider.eth.get_transaction_count(self.address, "pending"),
        }
        if "gas" in tx and "gasPrice" in tx:
            prepared["gas"] = int(tx["gas"])
            prepared["gasPrice"] = int(tx["gasPrice"])
        else:
            assert self.gas_estimator is not None
            estimate = await self.gas_estimator.estimate(
                prepared["to"], prepared["data"], from_address=self.address, value=prepared["value"]
            )
            prepared["gas"] = estimate.gas_limit
            prepared["gasPrice"] = estimate.gas_price

        signed = self._account.sign_transaction(prepared)
        tx_hash = await provider.eth.send_raw_transaction(signed.raw_transaction)
        return Web3.to_hex(tx_hash)


@dataclass
class JsonRpcWallet(WalletCapability):
    """Wallet whose accounts are managed by the connected node."""

    provider_factory: ProviderFactory
    address: Optional[str] = None

    async def get_address(self) -> str:
        if self.address:
            return AsyncWeb3.to_checksum_address(self.address)
        accounts = await self.provider_factory().eth.accounts
        if not accounts:
            raise FarmingSDKError("No wallet accounts found", "NO_WALLET")
        return AsyncWeb3.to_checksum_address(accounts[0])

    async def sign_typed_data(self, typed_data: Dict[str, Any]) -> str:
        address = await self.get_address()
        provider = self.provider_factory()
        signature = await provider.manager.coro_request(
            "eth_signTypedData_v4", [address, json.dumps(typed_data)]
        )
        return signature if isinstance(signature, str) else Web3.to_hex(signature)

    async def send_transaction(self, tx: Dict[str, Any]) -> str:
        address = await self.get_address()
        provider = self.provider_factory()
        tx_hash = await provider.eth.send_transaction({**tx, "from": address})
        return Web3.to_hex(tx_hash)
