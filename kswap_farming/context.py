"""Signing context supplied by the embedding application."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .types.backend import SigningBackend


@dataclass(frozen=True, slots=True)
class SigningContext:
    """Read-only description of the active wallet session.

    ``wallet_id``, ``chain_id`` and ``auth_token`` are only meaningful for the
    custodial backend, where the relay holds the signing key.
    """

    backend: SigningBackend = SigningBackend.EXTERNAL
    wallet_id: Optional[str] = None
    chain_id: Optional[int] = None
    wallet_address: Optional[str] = None
    auth_token: Optional[str] = None

    @property
    def is_custodial(self) -> bool:
        return self.backend is SigningBackend.CUSTODIAL

    @classmethod
    def external(cls, wallet_address: Optional[str] = None) -> "SigningContext":
        return cls(backend=SigningBackend.EXTERNAL, wallet_address=wallet_address)

    @classmethod
    def custodial(
        cls,
        wallet_id: Optional[str],
        chain_id: Optional[int],
        auth_token: Optional[str],
        wallet_address: Optional[str] = None,
    ) -> "SigningContext":
        return cls(
            backend=SigningBackend.CUSTODIAL,
            wallet_id=wallet_id,
            chain_id=chain_id,
            wallet_address=wallet_address,
            auth_token=auth_token,
        )
