"""Gasless stake path: EIP-2612 permit signed off-chain, then stakeWithPermit."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from hexbytes import HexBytes

from .abis import ERC20_PERMIT_ABI, STAKE_WITH_PERMIT_ABI
from .constants import (
    KALYCHAIN_CHAIN_ID,
    PERMIT_DEADLINE_SECONDS,
    PERMIT_DOMAIN_NAME,
    PERMIT_DOMAIN_VERSION,
)
from .dispatcher import encode_call
from .errors import FarmingSDKError
from .provider import ProviderFactory, contract
from .signers import ExternalSigner
from .types.transactions import PermitMessage, TransactionRequest
from .validation import validate_address, validate_amount

logger = logging.getLogger(__name__)

EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

PERMIT_TYPE = [
    {"name": "owner", "type": "address"},
    {"name": "spender", "type": "address"},
    {"name": "value", "type": "uint256"},
    {"name": "nonce", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
]


def build_permit_typed_data(
    message: PermitMessage,
    token_address: str,
    chain_id: int,
    domain_name: str = PERMIT_DOMAIN_NAME,
    domain_version: str = PERMIT_DOMAIN_VERSION,
) -> Dict[str, Any]:
    return {
        "types": {"EIP712Domain": EIP712_DOMAIN_TYPE, "Permit": PERMIT_TYPE},
        "primaryType": "Permit",
        "domain": {
            "name": domain_name,
            "version": domain_version,
            "chainId": chain_id,
            "verifyingContract": token_address,
        },
        "message": message.to_message(),
    }


def split_signature(signature: Any) -> Tuple[int, bytes, bytes]:
    """Split a 65 byte ``r || s || v`` signature into ``(v, r, s)``."""

    try:
        raw = HexBytes(signature)
    except (TypeError, ValueError) as exc:
        raise FarmingSDKError.invalid_signature_error(signature) from exc
    if len(raw) != 65:
        raise FarmingSDKError.invalid_signature_error(signature)

    r = bytes(raw[:32])
    s = bytes(raw[32:64])
    v = raw[64]
    if v < 27:
        v += 27
    return v, r, s


@dataclass
class PermitSigner:
    provider_factory: ProviderFactory
    signer: ExternalSigner
    chain_id: int = KALYCHAIN_CHAIN_ID
    domain_name: str = PERMIT_DOMAIN_NAME
    domain_version: str = PERMIT_DOMAIN_VERSION
    deadline_seconds: int = PERMIT_DEADLINE_SECONDS
    clock: Callable[[], float] = time.time

    async def fetch_nonce(self, token_address: str, owner: str) -> int:
        token = contract(self.provider_factory(), token_address, ERC20_PERMIT_ABI)
        return int(await token.functions.nonces(owner).call())

    async def build_message(self, staking_address: str, token_address: str, amount: int) -> PermitMessage:
        wallet = self.signer.require_wallet()
        owner = validate_address(await wallet.get_address(), "owner")
        deadline = int(self.clock()) + self.deadline_seconds
        # Read right before signing; a stale nonce makes the permit revert.
        nonce = await self.fetch_nonce(token_address, owner)
        return PermitMessage(
            owner=owner,
            spender=staking_address,
            value=amount,
            nonce=nonce,
            deadline=deadline,
        )

    async def stake_with_permit(self, staking_address: str, token_address: str, amount: int) -> str:
        staking = validate_address(staking_address, "staking_address")
        token = validate_address(token_address, "token_address")
        value = validate_amount(amount)
        wallet = self.signer.require_wallet()

        message = await self.build_message(staking, token, value)
        typed_data = build_permit_typed_data(
            message, token, self.chain_id, self.domain_name, self.domain_version
        )

        try:
            signature = await wallet.sign_typed_data(typed_data)
        except Exception as exc:
            raise FarmingSDKError.permit_signature_error(message.owner, staking) from exc
        if not signature:
            raise FarmingSDKError.permit_signature_error(message.owner, staking)

        v, r, s = split_signature(signature)
        arguments = [value, message.deadline, v, r, s]
        request = TransactionRequest(
            target_address=staking,
            function_name="stakeWithPermit",
            arguments=arguments,
            native_value=0,
            abi=STAKE_WITH_PERMIT_ABI,
            data=encode_call(staking, "stakeWithPermit", arguments, STAKE_WITH_PERMIT_ABI),
        )
        logger.info(
            "Staking %s on %s with permit (nonce %s, deadline %s)",
            value,
            staking,
            message.nonce,
            message.deadline,
        )
        return await self.signer.submit(request)
