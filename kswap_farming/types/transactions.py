"""Ephemeral structures built for state-changing calls."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .sdk_results import GasEstimate


@dataclass(slots=True)
class TransactionRequest:
    target_address: str
    function_name: str
    arguments: Sequence[Any]
    native_value: int
    abi: List[Dict[str, object]]
    data: str
    gas: Optional[GasEstimate] = None

    def to_envelope(self) -> Dict[str, Any]:
        """Raw ``{to, data, value}`` transaction handed to an external wallet."""

        envelope: Dict[str, Any] = {
            "to": self.target_address,
            "data": self.data,
            "value": int(self.native_value),
        }
        if self.gas is not None:
            envelope["gas"] = self.gas.gas_limit
            envelope["gasPrice"] = self.gas.gas_price
        return envelope


@dataclass(slots=True)
class PermitMessage:
    owner: str
    spender: str
    value: int
    nonce: int
    deadline: int

    def to_message(self) -> Dict[str, Any]:
        return {
            "owner": self.owner,
            "spender": self.spender,
            "value": int(self.value),
            "nonce": int(self.nonce),
            "deadline": int(self.deadline),
        }
