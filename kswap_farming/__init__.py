"""Python client for staking LP tokens into KalySwap farming contracts."""
from .apr import AprCalculator
from .context import SigningContext
from .credentials import CredentialProvider, StaticCredentialProvider, TerminalCredentialProvider
from .dispatcher import TransactionDispatcher, encode_call
from .errors import FarmingSDKError
from .farming import Farming, FarmingOptions
from .gas import GasEstimator
from .permit import PermitSigner, split_signature
from .provider import ProviderAccessor
from .registry import PoolRegistry
from .relay import RelayClient
from .settle import settle
from .signers import (
    CustodialSigner,
    ExternalSigner,
    JsonRpcWallet,
    LocalAccountWallet,
    Signer,
    WalletCapability,
)
from .staking import StakingContractReader
from .types import APRBreakdown, SigningBackend, StakingPosition, WhitelistedPool
from .uint256 import UInt256, format_units, parse_units

__all__ = [
    "AprCalculator",
    "SigningContext",
    "CredentialProvider",
    "StaticCredentialProvider",
    "TerminalCredentialProvider",
    "TransactionDispatcher",
    "encode_call",
    "FarmingSDKError",
    "Farming",
    "FarmingOptions",
    "GasEstimator",
    "PermitSigner",
    "split_signature",
    "ProviderAccessor",
    "PoolRegistry",
    "RelayClient",
    "settle",
    "CustodialSigner",
    "ExternalSigner",
    "JsonRpcWallet",
    "LocalAccountWallet",
    "Signer",
    "WalletCapability",
    "StakingContractReader",
    "APRBreakdown",
    "SigningBackend",
    "StakingPosition",
    "WhitelistedPool",
    "UInt256",
    "format_units",
    "parse_units",
]
