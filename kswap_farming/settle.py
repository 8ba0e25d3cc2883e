"""All-settle join used by every aggregate read."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Query = Tuple[Callable[[], Awaitable[Any]], Any]


async def _run(build: Callable[[], Awaitable[Any]]) -> Any:
    return await build()


async def settle(*queries: Query, labels: Optional[Sequence[str]] = None) -> List[Any]:
    """Run every ``(build, default)`` pair concurrently.

    ``build`` is a zero-argument callable returning the awaitable, so an error
    raised while building a query is settled like one raised while awaiting
    it. A query that fails yields its default; the others are unaffected and
    no exception is propagated. Results keep the order of ``queries``.
    """

    results = await asyncio.gather(*(_run(build) for build, _ in queries), return_exceptions=True)

    values: List[Any] = []
    for index, ((_, default), result) in enumerate(zip(queries, results)):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            label = labels[index] if labels else str(index)
            logger.debug("Query %s failed, using default %r: %s", label, default, result)
            values.append(default)
        else:
            values.append(result)
    return values


async def resolved(value: Any) -> Any:
    """Awaitable that yields ``value`` without issuing a query."""

    return value
