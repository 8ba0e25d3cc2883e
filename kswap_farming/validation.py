"""Input validation helpers."""
from __future__ import annotations

from typing import Any, Optional

from web3 import Web3

from .constants import ZERO_ADDRESS
from .errors import FarmingSDKError
from .uint256 import UInt256


def validate_address(address: Optional[str], parameter_name: str = "address") -> str:
    """Return ``address`` in checksum form or raise a validation error."""

    if address is None:
        raise FarmingSDKError(
            f"Invalid {parameter_name}: No address provided",
            "VALIDATION_ERROR",
            {"type": "MISSING_ADDRESS", "parameter_name": parameter_name},
        )

    candidate = address.strip() if isinstance(address, str) else address
    # Case is normalised here; a mis-cased checksum is not treated as an error.
    if not isinstance(candidate, str) or not Web3.is_address(candidate.lower()):
        raise FarmingSDKError(
            f"Invalid {parameter_name}: must be a 20 byte hex address",
            "VALIDATION_ERROR",
            {"type": "INVALID_ADDRESS", "parameter_name": parameter_name, "value": address},
        )

    return Web3.to_checksum_address(candidate)


def is_empty_address(address: Optional[str]) -> bool:
    if not address:
        return True
    return str(address).lower() == ZERO_ADDRESS


def validate_amount(amount: Any, parameter_name: str = "amount", allow_zero: bool = False) -> UInt256:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise FarmingSDKError(
            f"Invalid {parameter_name}: must be an integer amount in base units",
            "VALIDATION_ERROR",
            {
                "type": "INVALID_NUMERIC_AMOUNT",
                "parameter_name": parameter_name,
                "value": repr(amount),
                "reason": "not_integer",
            },
        )
    if amount < 0:
        raise FarmingSDKError(
            f"Invalid {parameter_name}: must be {'non-negative' if allow_zero else 'positive'}",
            "VALIDATION_ERROR",
            {
                "type": "INVALID_NUMERIC_AMOUNT",
                "parameter_name": parameter_name,
                "value": str(amount),
                "reason": "negative",
            },
        )
    if not allow_zero and amount == 0:
        raise FarmingSDKError(
            f"Invalid {parameter_name}: must be positive",
            "VALIDATION_ERROR",
            {
                "type": "INVALID_NUMERIC_AMOUNT",
                "parameter_name": parameter_name,
                "value": str(amount),
                "reason": "zero_not_allowed",
            },
        )
    return UInt256(amount)
