"""Read-only chain connection helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from web3 import AsyncWeb3

from .constants import KALYCHAIN_RPC_URL

ProviderFactory = Callable[[], AsyncWeb3]


@dataclass(slots=True)
class ProviderAccessor:
    """Builds a fresh :class:`AsyncWeb3` for every call; holds no connection state."""

    rpc_url: str = KALYCHAIN_RPC_URL

    def __call__(self) -> AsyncWeb3:
        return AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(self.rpc_url))


def contract(provider: AsyncWeb3, address: str, abi: List[Dict[str, object]]) -> Any:
    return provider.eth.contract(address=AsyncWeb3.to_checksum_address(address), abi=abi)
