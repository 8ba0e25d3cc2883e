import asyncio

import pytest

from kswap_farming.settle import resolved, settle


async def _value(value, delay=0.0):
    await asyncio.sleep(delay)
    return value


async def _fail(error):
    raise error


@pytest.mark.asyncio
async def test_settle_keeps_order_and_defaults_failures():
    results = await settle(
        (lambda: _value("slow", 0.01), None),
        (lambda: _fail(RuntimeError("boom")), "fallback"),
        (lambda: _value(3), 0),
        labels=["slow", "broken", "fast"],
    )

    assert results == ["slow", "fallback", 3]


@pytest.mark.asyncio
async def test_settle_all_failures_yield_all_defaults():
    results = await settle(
        (lambda: _fail(ValueError("a")), 0),
        (lambda: _fail(ConnectionError("b")), False),
    )

    assert results == [0, False]


@pytest.mark.asyncio
async def test_settle_defaults_query_that_fails_while_building():
    awaited = []

    async def tracked(value):
        awaited.append(value)
        return value

    def broken_builder():
        raise TypeError("could not encode argument")

    results = await settle(
        (lambda: tracked("first"), None),
        (broken_builder, "fallback"),
        (lambda: tracked("last"), None),
    )

    assert results == ["first", "fallback", "last"]
    assert awaited == ["first", "last"]


@pytest.mark.asyncio
async def test_resolved_issues_no_query():
    assert await resolved(5) == 5
