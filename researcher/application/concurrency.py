"""
Settle-all fan-out helper.

Dependencies: asyncio (stdlib)
System role: Parallel independent calls where one failure must not sink the rest
"""

import asyncio
from collections.abc import Awaitable
from typing import Any


async def gather_settled(**awaitables: Awaitable[Any]) -> dict[str, Any]:
    """
    Await all named awaitables concurrently.

    Args:
        **awaitables: Name to coroutine/awaitable

    Returns:
        dict: Name to result, or to the raised exception for failed entries.
            Cancellation is not swallowed.
    """
    names = list(awaitables)
    results = await asyncio.gather(*awaitables.values(), return_exceptions=True)
    for result in results:
        if isinstance(result, asyncio.CancelledError):
            raise result
    return dict(zip(names, results))


def split_settled(settled: dict[str, Any]) -> tuple[dict[str, Any], dict[str, str]]:
    """
    Separate successful results from failures.

    Args:
        settled: Output of gather_settled

    Returns:
        tuple: (name -> result for successes, name -> error string for failures)
    """
    values = {k: v for k, v in settled.items() if not isinstance(v, BaseException)}
    errors = {k: str(v) for k, v in settled.items() if isinstance(v, BaseException)}
    return values, errors
