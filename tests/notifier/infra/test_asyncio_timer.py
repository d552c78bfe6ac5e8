"""Testes do AsyncioTimer sobre o event loop real."""

from __future__ import annotations

import asyncio
import logging

import pytest

from notifier.infra.scheduling import AsyncioTimer


class _Counter:
    def __init__(self) -> None:
        self.calls = 0

    async def __call__(self) -> None:
        self.calls += 1


@pytest.mark.asyncio
async def test_timer_repeats_until_cancelled() -> None:
    counter = _Counter()
    timer = AsyncioTimer(counter, name="test")

    timer.arm(0.01)
    await asyncio.sleep(0.055)
    timer.cancel()
    await timer.drain()
    calls = counter.calls
    await asyncio.sleep(0.03)

    assert calls >= 2
    assert counter.calls == calls
    assert not timer.armed


@pytest.mark.asyncio
async def test_fire_now_does_not_change_schedule() -> None:
    counter = _Counter()
    timer = AsyncioTimer(counter)
    timer.arm(10)

    timer.fire_now()
    await asyncio.sleep(0)
    await timer.drain()

    assert counter.calls == 1
    assert timer.armed
    assert timer.interval == 10
    timer.cancel()


@pytest.mark.asyncio
async def test_rearm_replaces_interval() -> None:
    timer = AsyncioTimer(_Counter())
    timer.arm(10)

    timer.rearm(20)

    assert timer.interval == 20
    assert timer.armed
    timer.cancel()


def test_non_positive_interval_is_rejected() -> None:
    timer = AsyncioTimer(_Counter())

    with pytest.raises(ValueError, match="interval"):
        timer.arm(0)


@pytest.mark.asyncio
async def test_callback_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    async def failing() -> None:
        raise RuntimeError("tick failed")

    timer = AsyncioTimer(failing, name="failing")
    caplog.set_level(logging.ERROR, logger="notifier.infra.scheduling.asyncio_timer")

    timer.fire_now()
    await asyncio.sleep(0)
    await timer.drain()
    await asyncio.sleep(0)

    assert any(record.getMessage() == "timer_callback_failed" for record in caplog.records)
    assert timer.pending_tasks == 0
