#!/usr/bin/env python3
"""Run KalySwap farming read-only checks and emit CI-friendly output."""
from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass
from typing import List, Optional

from kswap_farming import Farming, FarmingOptions, format_units
from kswap_farming.types import APRBreakdown, StakingPosition, WhitelistedPool


@dataclass(slots=True)
class FarmCheckResult:
    comment: str
    summary: str


def _format_amount(value: int, places: int = 6) -> str:
    text = format_units(value)
    whole, _, fraction = text.partition(".")
    if fraction:
        fraction = fraction[:places].rstrip("0")
    return f"{int(whole):,}.{fraction}" if fraction else f"{int(whole):,}"


def _format_position(position: Optional[StakingPosition]) -> str:
    if position is None:
        return "  - No staking information available."
    return "\n".join(
        [
            f"  - Staking contract `{position.staking_contract_address}`",
            f"  - Total staked: {_format_amount(position.total_staked_amount)}",
            f"  - Reward rate: {_format_amount(position.reward_rate)} / second",
            f"  - Period finish: {position.period_finish}",
            f"  - Staked / earned: {_format_amount(position.staked_amount)} / "
            f"{_format_amount(position.earned_amount)}",
        ]
    )


def _format_apr(apr: Optional[APRBreakdown]) -> str:
    if apr is None:
        return "  - APR unavailable."
    if not apr.computed:
        return f"  - Pool rewards per year: {_format_amount(apr.pool_annual_rewards)} (APR not computed)"
    return f"  - Combined APR: {apr.combined_apr:.2f}%"


def _format_pool(pool: WhitelistedPool, position: Optional[StakingPosition], apr: Optional[APRBreakdown]) -> str:
    status = "active" if pool.is_active else "inactive"
    return "\n".join(
        [
            f"- **`{pool.pair_address}`** weight {pool.weight} ({status})",
            _format_position(position),
            _format_apr(apr),
        ]
    )


async def run_checks() -> FarmCheckResult:
    options = FarmingOptions.from_env()
    wallet_address = os.environ.get("WALLET_ADDRESS")
    pool_limit = int(os.environ.get("POOL_LIMIT", "5"))

    farming = Farming(options)
    pools = await farming.get_whitelisted_pools()

    sections: List[str] = []
    for pool in pools[:pool_limit]:
        position, apr = await asyncio.gather(
            farming.get_staking_info(pool.pair_address, wallet_address),
            farming.get_pool_apr(pool.pair_address),
        )
        sections.append(_format_pool(pool, position, apr))

    if not sections:
        sections.append("- No whitelisted pools among the configured pairs.")
    if len(pools) > pool_limit:
        sections.append(f"- …and {len(pools) - pool_limit} more pools")

    comment_lines = [
        "<!-- kswap-farming-readonly -->",
        "### KalySwap Farming Read-only Verification",
        "",
        f"**Pools** (RPC `{options.rpc_url}`, chain {options.chain_id})",
        *sections,
        "",
        "<sub>Generated by python-kswap-farming-sdk CI</sub>",
    ]

    summary_lines = [
        "### KalySwap Farming Read-only Verification",
        f"* Candidate pairs: {len(options.pair_addresses)}",
        f"* Whitelisted pools: {len(pools)}",
        f"* Active pools: {sum(1 for pool in pools if pool.is_active)}",
    ]

    return FarmCheckResult(comment="\n".join(comment_lines), summary="\n".join(summary_lines))


def main() -> None:
    result = asyncio.run(run_checks())

    print(result.summary)
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if summary_path:
        with open(summary_path, "a", encoding="utf-8") as handle:
            handle.write(result.summary)
            handle.write("\n")

    output_path = os.environ.get("GITHUB_OUTPUT")
    if output_path:
        with open(output_path, "a", encoding="utf-8") as handle:
            handle.write("comment_body<<KSWAP\n")
            handle.write(result.comment)
            handle.write("\nKSWAP\n")


if __name__ == "__main__":
    main()
