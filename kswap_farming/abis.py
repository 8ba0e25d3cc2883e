"""ABI fragments for the contracts the farming SDK talks to."""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

AbiEntry = Dict[str, object]


def _function(
    name: str,
    inputs: Sequence[Tuple[str, str]] = (),
    outputs: Sequence[str] = (),
    state_mutability: str = "view",
) -> AbiEntry:
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": arg_name, "type": arg_type} for arg_name, arg_type in inputs],
        "outputs": [{"name": "", "type": out_type} for out_type in outputs],
        "stateMutability": state_mutability,
    }


LIQUIDITY_POOL_MANAGER_V2_ABI: List[AbiEntry] = [
    _function("isWhitelisted", [("pair", "address")], ["bool"]),
    _function("weights", [("pair", "address")], ["uint256"]),
    # Reverts for pairs that are not quoted against WKLC.
    _function("getKlcLiquidity", [("pair", "address")], ["uint256"]),
    _function("stakes", [("pair", "address")], ["address"]),
    _function("numPools", [], ["uint256"]),
    _function("calculateAndDistribute", [], [], "nonpayable"),
]

TREASURY_VESTER_ABI: List[AbiEntry] = [
    _function("vestingAmount", [], ["uint256"]),
    _function("halvingPeriod", [], ["uint256"]),
    _function("vestingEnabled", [], ["bool"]),
    _function("claim", [], ["uint256"], "nonpayable"),
]

STAKING_REWARDS_ABI: List[AbiEntry] = [
    _function("totalSupply", [], ["uint256"]),
    _function("rewardRate", [], ["uint256"]),
    _function("periodFinish", [], ["uint256"]),
    _function("balanceOf", [("account", "address")], ["uint256"]),
    _function("earned", [("account", "address")], ["uint256"]),
    _function("stake", [("amount", "uint256")], [], "nonpayable"),
    _function("withdraw", [("amount", "uint256")], [], "nonpayable"),
    _function("getReward", [], [], "nonpayable"),
    _function("exit", [], [], "nonpayable"),
]

STAKE_WITH_PERMIT_ABI: List[AbiEntry] = [
    _function(
        "stakeWithPermit",
        [
            ("amount", "uint256"),
            ("deadline", "uint256"),
            ("v", "uint8"),
            ("r", "bytes32"),
            ("s", "bytes32"),
        ],
        [],
        "nonpayable",
    ),
]

ERC20_APPROVE_ABI: List[AbiEntry] = [
    _function("approve", [("spender", "address"), ("amount", "uint256")], ["bool"], "nonpayable"),
]

ERC20_PERMIT_ABI: List[AbiEntry] = [
    _function("nonces", [("owner", "address")], ["uint256"]),
]
