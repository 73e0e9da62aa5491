"""
Async Helpers
=============

Sequencing and cleanup helpers for code mixing plain and async callables.

Both helpers are coroutines: nothing runs until they are awaited (or
scheduled with ``asyncio.create_task``). Failures are never wrapped; the
caller sees the exact exception raised by the failing step.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Sequence

logger = logging.getLogger(__name__)


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def waterfall(fns: Sequence[Callable[[Any], Any]], init: Any) -> Any:
    """
    Resolve a list of functions sequentially, feeding each one the
    result of the previous one.

    Functions may be sync or async; an awaitable result is awaited before
    the next function is called.

    Args:
        fns: The list of single-argument functions
        init: The initial value (awaited first if awaitable)

    Returns:
        The value returned by the last function, or ``init`` when
        ``fns`` is empty

    Raises:
        Exception: Whatever the failing step raised; later steps are skipped
    """
    value = await _resolve(init)

    for index, fn in enumerate(fns):
        try:
            value = await _resolve(fn(value))
        except Exception as exc:
            logger.debug(
                "waterfall step %d/%d failed: %s: %s",
                index + 1, len(fns), type(exc).__name__, exc,
            )
            raise

    return value


async def p_finally(
    awaitable: Awaitable[Any],
    fn: Callable[[], Any],
) -> Any:
    """
    Ensure a callback always runs once ``awaitable`` has settled.

    The callback's own result is discarded (but awaited if awaitable).
    The awaitable's value is returned, or its exception re-raised,
    after the callback completes.
    """
    try:
        value = await awaitable
    except BaseException as exc:
        logger.debug("p_finally running callback after %s", type(exc).__name__)
        await _resolve(fn())
        raise

    await _resolve(fn())
    return value
