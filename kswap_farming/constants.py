"""Chain defaults and protocol constants for KalySwap farming."""
from __future__ import annotations

KALYCHAIN_CHAIN_ID = 3888
KALYCHAIN_RPC_URL = "https://rpc.kalychain.io/rpc"

LIQUIDITY_POOL_MANAGER_V2_ADDRESS = "0xe83e7ede1358FA87e5039CF8B1cffF383Bc2896A"
TREASURY_VESTER_ADDRESS = "0x4C4b968232a8603e2D1e53AB26E9a0319fA33ED3"

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Registry weights are expressed out of this denominator.
TOTAL_WEIGHT = 100

SECONDS_PER_YEAR = 365 * 24 * 60 * 60

PERMIT_DEADLINE_SECONDS = 1200
PERMIT_DOMAIN_NAME = "KalySwap LP"
PERMIT_DOMAIN_VERSION = "1"

# Ceiling the relay applies to every custodial submission.
RELAY_GAS_LIMIT = 500_000
RELAY_GRAPHQL_PATH = "/api/graphql"

GAS_LIMIT_BUFFER = 1.1
