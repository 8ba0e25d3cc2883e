"""Custom exceptions for the farming SDK."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(eq=False)
class FarmingSDKError(Exception):
    """Base exception raised by the farming SDK."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @classmethod
    def no_wallet_error(cls) -> "FarmingSDKError":
        return cls(
            "This method requires an external wallet. Please provide a wallet to the Farming constructor.",
            "NO_WALLET",
        )

    @classmethod
    def authentication_required_error(cls, reason: str) -> "FarmingSDKError":
        return cls(reason, "AUTHENTICATION_REQUIRED")

    @classmethod
    def credential_required_error(cls) -> "FarmingSDKError":
        return cls(
            "Password required for transaction signing",
            "CREDENTIAL_REQUIRED",
        )

    @classmethod
    def relay_error(cls, message: str, errors: Any = None) -> "FarmingSDKError":
        return cls(message, "RELAY_ERROR", {"errors": errors})

    @classmethod
    def invalid_response_error(cls, description: str, payload: Any) -> "FarmingSDKError":
        return cls(description, "INVALID_RESPONSE", {"payload": payload})

    @classmethod
    def permit_unsupported_error(cls, backend: str) -> "FarmingSDKError":
        return cls(
            "Permit staking requires a directly signing wallet; use approve and stake instead.",
            "PERMIT_UNSUPPORTED",
            {"backend": backend},
        )

    @classmethod
    def permit_signature_error(cls, owner: str, spender: str) -> "FarmingSDKError":
        return cls(
            "Permit signature was not obtained.",
            "PERMIT_SIGNATURE_FAILED",
            {"owner": owner, "spender": spender},
        )

    @classmethod
    def invalid_signature_error(cls, signature: Any) -> "FarmingSDKError":
        return cls(
            "Signature must be 65 bytes (r, s, v).",
            "INVALID_SIGNATURE",
            {"signature": signature},
        )

    @classmethod
    def uint256_overflow_error(cls, operation: str, value: int) -> "FarmingSDKError":
        return cls(
            f"uint256 overflow in {operation}",
            "UINT256_OVERFLOW",
            {"operation": operation, "value": value},
        )

    @classmethod
    def uint256_underflow_error(cls, operation: str, value: int) -> "FarmingSDKError":
        return cls(
            f"uint256 underflow in {operation}",
            "UINT256_UNDERFLOW",
            {"operation": operation, "value": value},
        )

    @classmethod
    def from_http_response(
        cls, url: str, status: int, body: Any, message: Optional[str]
    ) -> "FarmingSDKError":
        # The relay's own message is surfaced unchanged, whatever the status.
        if message:
            return cls(
                message,
                "RELAY_ERROR",
                {"status": status, "body": body, "url": url},
            )

        return cls(
            f"Unexpected HTTP Error {status} from {url}",
            "HTTP_ERROR",
            {"status": status, "body": body, "url": url},
        )
