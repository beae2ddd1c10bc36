"""Asynchronous helpers: a bounded-concurrency ordered mapper and a sleep.

`map_async` runs an async worker over a list of inputs with at most
``concurrency`` invocations in flight. A fixed pool of worker tasks drains a
shared queue, so a new input starts as soon as any running one finishes
(sliding window, not fixed batches). Output order always matches input order,
whatever order the workers complete in.

Failure semantics:
    The first worker exception is re-raised to the caller unchanged. Workers
    that are still running are not cancelled; they finish their current item
    and then stop claiming new ones. Their results and any later failures are
    discarded (failures are logged at DEBUG). Cancelling the `map_async` call
    itself cancels every worker task that is still running.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, TypeVar

from .config import get_settings
from .errors import OutOfRangeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

__all__ = ["map_async", "wait"]


async def wait(seconds: float) -> None:
    """Resolve after ``seconds`` (a float, so fractions of a second are fine)."""
    await asyncio.sleep(seconds)


def _log_abandoned(task: "asyncio.Task[None]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Discarding failure from abandoned map_async worker: %r", exc)


async def map_async(
    inputs: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    concurrency: Optional[int] = None,
) -> List[R]:
    """Apply ``worker`` to every input with bounded concurrency.

    Args:
        inputs: Items to process.
        worker: Async function called once per item.
        concurrency: Maximum number of simultaneous ``worker`` calls. Defaults
            to the ``MAP_ASYNC_CONCURRENCY`` setting.

    Returns:
        ``[await worker(x) for x in inputs]`` in input order.

    Raises:
        OutOfRangeError: ``concurrency`` is lower than 1 (before any work).
        Exception: The first exception raised by ``worker``, as-is.
    """
    if concurrency is None:
        concurrency = get_settings().MAP_ASYNC_CONCURRENCY
    if concurrency < 1:
        raise OutOfRangeError("concurrency", concurrency, "an integer >= 1")

    items = list(inputs)
    if not items:
        return []

    queue: "asyncio.Queue[Tuple[int, T]]" = asyncio.Queue()
    for pair in enumerate(items):
        queue.put_nowait(pair)

    results: List[Optional[R]] = [None] * len(items)
    failed = False

    async def _drain() -> None:
        nonlocal failed
        while not failed:
            try:
                index, item = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            try:
                results[index] = await worker(item)
            except Exception:
                failed = True
                raise

    pool_size = min(concurrency, len(items))
    logger.debug("map_async: %d input(s), %d worker task(s)", len(items), pool_size)
    tasks = [asyncio.ensure_future(_drain()) for _ in range(pool_size)]

    pending = set(tasks)
    try:
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_EXCEPTION)
            errors = [exc for exc in (task.exception() for task in done) if exc is not None]
            if errors:
                for other in pending:
                    other.add_done_callback(_log_abandoned)
                for extra in errors[1:]:
                    logger.debug("Discarding concurrent map_async failure: %r", extra)
                raise errors[0]
    except asyncio.CancelledError:
        # the caller gave up: stop the whole batch, not just new claims
        failed = True
        for task in pending:
            task.cancel()
            task.add_done_callback(_log_abandoned)
        logger.debug("map_async cancelled; cancelling %d worker task(s)", len(pending))
        raise

    return results  # type: ignore[return-value]
