"""Single entry point for state-changing contract calls."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from web3 import Web3

from .abis import STAKING_REWARDS_ABI
from .signers import Signer
from .types.sdk_results import GasEstimate
from .types.transactions import TransactionRequest
from .validation import validate_address, validate_amount

logger = logging.getLogger(__name__)

# Encoding never touches the network, so one provider-less instance is shared.
_ENCODER = Web3()


def encode_call(
    target_address: str,
    function_name: str,
    arguments: Sequence[Any],
    abi: List[Dict[str, object]],
) -> str:
    target = Web3.to_checksum_address(target_address)
    encoder = _ENCODER.eth.contract(address=target, abi=abi)
    return encoder.encode_abi(function_name, args=list(arguments))


class TransactionDispatcher:
    """Encodes a call and submits it through whichever signer is active.

    Both signing backends return the transaction hash as a string; failures
    are raised to the caller unchanged.
    """

    def __init__(self, signer: Signer) -> None:
        self._signer = signer

    @property
    def signer(self) -> Signer:
        return self._signer

    def build_request(
        self,
        target_address: str,
        function_name: str,
        arguments: Sequence[Any] = (),
        native_value: int = 0,
        abi: Optional[List[Dict[str, object]]] = None,
        gas: Optional[GasEstimate] = None,
    ) -> TransactionRequest:
        target = validate_address(target_address, "target_address")
        fragment = abi if abi is not None else STAKING_REWARDS_ABI
        value = validate_amount(native_value, "native_value", allow_zero=True)
        return TransactionRequest(
            target_address=target,
            function_name=function_name,
            arguments=list(arguments),
            native_value=value,
            abi=fragment,
            data=encode_call(target, function_name, arguments, fragment),
            gas=gas,
        )

    async def dispatch(
        self,
        target_address: str,
        function_name: str,
        arguments: Sequence[Any] = (),
        native_value: int = 0,
        abi: Optional[List[Dict[str, object]]] = None,
        gas: Optional[GasEstimate] = None,
    ) -> str:
        request = self.build_request(target_address, function_name, arguments, native_value, abi, gas)
        tx_hash = await self._signer.submit(request)
        logger.info("%s on %s submitted: %s", function_name, request.target_address, tx_hash)
        return tx_hash
