"""
Async Helper Tests
==================

Tests for waterfall sequencing and p_finally cleanup.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from recordkit.utils.async_helpers import p_finally, waterfall


async def _double(x):
    await asyncio.sleep(0)
    return x * 2


async def _fail(x):
    raise ValueError("boom")


# ---------------------------------------------------------------------------
# waterfall
# ---------------------------------------------------------------------------

class TestWaterfall:
    """Tests for waterfall."""

    @pytest.mark.asyncio
    async def test_empty_list_resolves_initial_value(self):
        assert await waterfall([], 5) == 5

    @pytest.mark.asyncio
    async def test_mixes_sync_and_async_steps(self):
        """x + 1 then async x * 2, starting from 3, gives 8."""
        assert await waterfall([lambda x: x + 1, _double], 3) == 8

    @pytest.mark.asyncio
    async def test_awaits_initial_awaitable(self):
        assert await waterfall([lambda x: x + 1], _double(2)) == 5

    @pytest.mark.asyncio
    async def test_steps_run_in_order(self):
        calls = []

        def step(name):
            async def run(value):
                calls.append(name)
                await asyncio.sleep(0)
                return value + [name]
            return run

        result = await waterfall([step("a"), step("b"), step("c")], [])

        assert result == ["a", "b", "c"]
        assert calls == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_async_failure_stops_the_chain(self):
        """A failing step propagates its exception and later steps never run."""
        after = MagicMock()

        with pytest.raises(ValueError, match="boom"):
            await waterfall([lambda x: x, _fail, after], 1)

        after.assert_not_called()

    @pytest.mark.asyncio
    async def test_sync_failure_propagates_unchanged(self):
        error = KeyError("missing")

        def explode(_):
            raise error

        with pytest.raises(KeyError) as exc_info:
            await waterfall([explode], None)

        assert exc_info.value is error


# ---------------------------------------------------------------------------
# p_finally
# ---------------------------------------------------------------------------

class TestPFinally:
    """Tests for p_finally."""

    @pytest.mark.asyncio
    async def test_resolves_with_original_value(self):
        """The callback runs once and its return value is discarded."""
        callback = MagicMock(return_value="ignored")

        async def work():
            callback.assert_not_called()
            return "ok"

        assert await p_finally(work(), callback) == "ok"
        callback.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_awaits_async_callback(self):
        callback = AsyncMock(return_value="ignored")

        assert await p_finally(_double(21), callback) == 42
        callback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_reraises_original_failure_after_callback(self):
        callback = AsyncMock()

        with pytest.raises(ValueError, match="boom"):
            await p_finally(_fail(1), callback)

        callback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_callback_runs_before_result_settles(self):
        events = []

        async def work():
            events.append("work")
            return 1

        def callback():
            events.append("callback")

        await p_finally(work(), callback)
        events.append("settled")

        assert events == ["work", "callback", "settled"]

    @pytest.mark.asyncio
    async def test_callback_error_propagates(self):
        def callback():
            raise RuntimeError("cleanup failed")

        with pytest.raises(RuntimeError, match="cleanup failed"):
            await p_finally(_double(1), callback)

    @pytest.mark.asyncio
    async def test_works_with_futures(self):
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        loop.call_soon(future.set_result, "done")
        callback = MagicMock()

        assert await p_finally(future, callback) == "done"
        callback.assert_called_once()
