from __future__ import annotations

import asyncio
import time

import pytest

from utilkit.aio import map_async, wait
from utilkit.errors import OutOfRangeError

pytestmark = pytest.mark.asyncio


async def test_results_follow_input_order():
    async def double(x: int) -> int:
        # smaller inputs finish later
        await asyncio.sleep((6 - x) * 0.01)
        return x * 2

    assert await map_async([1, 2, 3, 4, 5], double, 2) == [2, 4, 6, 8, 10]


async def test_empty_input():
    async def never(x):
        raise AssertionError("worker must not be called")

    assert await map_async([], never, 3) == []


async def test_concurrency_cap_is_respected():
    active = 0
    peak = 0

    async def track(x: int) -> int:
        nonlocal active, peak
        active += 1
        peak = max(peak, active)
        await asyncio.sleep(0.01)
        active -= 1
        return x

    assert await map_async(list(range(20)), track, 3) == list(range(20))
    assert peak == 3


async def test_sliding_window_starts_next_input_immediately():
    finished = []

    async def work(x: int) -> int:
        await asyncio.sleep(0.05 if x == 0 else 0.001)
        finished.append(x)
        return x

    assert await map_async([0, 1, 2, 3], work, 2) == [0, 1, 2, 3]
    # inputs 2 and 3 run while 0 is still in flight
    assert finished == [1, 2, 3, 0]


async def test_first_failure_is_reraised_verbatim():
    boom = ValueError("boom on 2")

    async def worker(x: int) -> int:
        if x == 2:
            raise boom
        await asyncio.sleep(0.01)
        return x

    with pytest.raises(ValueError) as excinfo:
        await map_async([1, 2, 3], worker, 2)
    assert excinfo.value is boom


async def test_failure_stops_claiming_new_inputs():
    calls = []

    async def worker(x: int) -> int:
        calls.append(x)
        await asyncio.sleep(0)
        if x == 0:
            raise RuntimeError("first")
        await asyncio.sleep(0.01)
        return x

    with pytest.raises(RuntimeError):
        await map_async(list(range(10)), worker, 2)
    await asyncio.sleep(0.05)
    assert calls == [0, 1]


async def test_late_sibling_failure_is_swallowed():
    async def worker(x: int) -> int:
        if x == 0:
            raise KeyError("early")
        await asyncio.sleep(0.01)
        raise KeyError("late")

    with pytest.raises(KeyError) as excinfo:
        await map_async([0, 1], worker, 2)
    assert excinfo.value.args == ("early",)
    await asyncio.sleep(0.03)


async def test_invalid_concurrency_raises_before_work():
    called = False

    async def worker(x):
        nonlocal called
        called = True
        return x

    with pytest.raises(OutOfRangeError) as excinfo:
        await map_async([1], worker, 0)
    assert excinfo.value.name == "concurrency"
    assert not called


async def test_default_concurrency_comes_from_settings(monkeypatch):
    from utilkit.config import get_settings

    monkeypatch.setenv("UTILKIT_MAP_ASYNC_CONCURRENCY", "1")
    get_settings.cache_clear()
    active = 0
    peak = 0

    async def track(x: int) -> int:
        nonlocal active, peak
        active += 1
        peak = max(peak, active)
        await asyncio.sleep(0.001)
        active -= 1
        return -x

    assert await map_async([1, 2, 3], track) == [-1, -2, -3]
    assert peak == 1


async def test_wait_sleeps_for_seconds():
    start = time.monotonic()
    await wait(0.02)
    assert time.monotonic() - start >= 0.015


async def test_cancelling_the_call_stops_all_workers():
    started = []
    finished = []

    async def worker(x: int) -> int:
        started.append(x)
        await asyncio.sleep(0.01)
        finished.append(x)
        return x

    call = asyncio.ensure_future(map_async(list(range(10)), worker, 2))
    await asyncio.sleep(0.005)
    call.cancel()
    with pytest.raises(asyncio.CancelledError):
        await call
    await asyncio.sleep(0.1)
    assert started == [0, 1]
    assert finished == []
