import pytest

from kswap_farming.apr import AprCalculator, annual_emission
from kswap_farming.constants import (
    LIQUIDITY_POOL_MANAGER_V2_ADDRESS,
    SECONDS_PER_YEAR,
    TREASURY_VESTER_ADDRESS,
)
from kswap_farming.registry import PoolRegistry
from kswap_farming.types import APRBreakdown

PAIR = "0x" + "aa" * 20


def _calculator(chain, manager=None, vester=None):
    manager_responses = {"weights": 10, "numPools": 4, "isWhitelisted": True}
    manager_responses.update(manager or {})
    vester_responses = {
        "vestingAmount": 1000,
        "halvingPeriod": SECONDS_PER_YEAR,
        "vestingEnabled": True,
    }
    vester_responses.update(vester or {})
    chain.deploy(LIQUIDITY_POOL_MANAGER_V2_ADDRESS, manager_responses)
    chain.deploy(TREASURY_VESTER_ADDRESS, vester_responses)
    registry = PoolRegistry(chain.provider_factory)
    return AprCalculator(chain.provider_factory, registry)


def test_annual_emission_scales_to_one_year():
    assert annual_emission(1000, SECONDS_PER_YEAR) == 1000
    assert annual_emission(1000, SECONDS_PER_YEAR // 2) == 2000
    assert annual_emission(1000, 0) == 0


@pytest.mark.asyncio
async def test_compute_apr_reports_reward_share_as_placeholder(chain):
    calculator = _calculator(chain)

    breakdown = await calculator.compute_apr(PAIR)

    assert breakdown.annual_rewards == 1000
    assert breakdown.pool_annual_rewards == 250
    assert breakdown.staking_apr == 0.0
    assert breakdown.swap_fee_apr == 0.0
    assert breakdown.combined_apr == 0.0
    assert breakdown.computed is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "manager, vester",
    [
        ({}, {"vestingEnabled": False}),
        ({"weights": 0}, {}),
        ({"isWhitelisted": False}, {}),
        ({"isWhitelisted": RuntimeError("boom")}, {}),
        ({}, {"vestingEnabled": RuntimeError("boom")}),
    ],
)
async def test_compute_apr_inactive_pool_is_zero(chain, manager, vester):
    calculator = _calculator(chain, manager, vester)

    breakdown = await calculator.compute_apr(PAIR)

    assert breakdown == APRBreakdown.zero()
    assert breakdown.computed is True


@pytest.mark.asyncio
async def test_compute_apr_zero_halving_period(chain):
    calculator = _calculator(chain, vester={"halvingPeriod": 0})

    breakdown = await calculator.compute_apr(PAIR)

    assert breakdown.annual_rewards == 0
    assert breakdown.pool_annual_rewards == 0


@pytest.mark.asyncio
async def test_compute_apr_pool_count_failure_defaults_to_one(chain):
    calculator = _calculator(chain, manager={"numPools": RuntimeError("boom")})

    breakdown = await calculator.compute_apr(PAIR)

    assert breakdown.pool_annual_rewards == 1000


@pytest.mark.asyncio
async def test_compute_apr_zero_pool_count(chain):
    calculator = _calculator(chain, manager={"numPools": 0})

    breakdown = await calculator.compute_apr(PAIR)

    assert breakdown.annual_rewards == 1000
    assert breakdown.pool_annual_rewards == 0


@pytest.mark.asyncio
async def test_try_compute_apr_absorbs_errors(chain):
    calculator = _calculator(chain)

    assert await calculator.try_compute_apr("0xnot-an-address") is None
