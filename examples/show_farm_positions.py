"""Example listing farm pools and a wallet's staking position using the Python SDK."""
import asyncio
import os

from kswap_farming import Farming, FarmingOptions, format_units


async def main() -> None:
    farming = Farming(FarmingOptions.from_env())
    user = os.environ.get("WALLET_ADDRESS")

    for pool in await farming.get_whitelisted_pools():
        print("Pool:", pool.pair_address, "weight:", pool.weight, "active:", pool.is_active)

        position = await farming.get_staking_info(pool.pair_address, user)
        if position is None:
            print("  No staking contract")
            continue
        print("  Staking contract:", position.staking_contract_address)
        print("  Total staked:", format_units(position.total_staked_amount))
        print("  Your stake:", format_units(position.staked_amount))
        print("  Unclaimed rewards:", format_units(position.earned_amount))

        apr = await farming.get_pool_apr(pool.pair_address)
        if apr is not None:
            print("  Pool rewards per year:", format_units(apr.pool_annual_rewards))


if __name__ == "__main__":  # pragma: no cover - manual usage
    asyncio.run(main())
