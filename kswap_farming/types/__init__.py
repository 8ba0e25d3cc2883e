"""Typed structures returned and consumed by the farming SDK."""
from .backend import SigningBackend
from .sdk_results import APRBreakdown, GasEstimate, StakingPosition, WhitelistedPool
from .transactions import PermitMessage, TransactionRequest

__all__ = [
    "SigningBackend",
    "APRBreakdown",
    "GasEstimate",
    "StakingPosition",
    "WhitelistedPool",
    "PermitMessage",
    "TransactionRequest",
]
