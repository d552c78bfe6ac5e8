"""Timer recorrente sobre o event loop do asyncio."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from notifier.protocols.timer import TimerProtocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

_COMPONENT = "asyncio_timer"


class AsyncioTimer(TimerProtocol):
    """Dispara `callback` a cada `interval` segundos via loop.call_later.

    Cada disparo roda como task; as tasks em andamento ficam referenciadas
    ate terminarem. Precisa ser armado de dentro de um loop em execucao.
    """

    __slots__ = ("_callback", "_handle", "_interval", "_name", "_tasks")

    def __init__(self, callback: Callable[[], Awaitable[None]], *, name: str = "timer") -> None:
        self._callback = callback
        self._name = name
        self._interval = 0.0
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def armed(self) -> bool:
        return self._handle is not None

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    def arm(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval deve ser > 0")
        self.cancel()
        self._interval = float(interval)
        self._schedule()

    def rearm(self, interval: float) -> None:
        self.arm(interval)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def fire_now(self) -> None:
        asyncio.get_running_loop().call_soon(self._spawn)

    async def drain(self) -> None:
        """Aguarda os disparos em andamento (usado no shutdown)."""
        while self._tasks:
            await asyncio.gather(*tuple(self._tasks), return_exceptions=True)

    def _schedule(self) -> None:
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._interval, self._on_fire)

    def _on_fire(self) -> None:
        # Reagenda antes do callback: o callback pode cancelar ou rearmar
        self._schedule()
        self._spawn()

    def _spawn(self) -> None:
        task = asyncio.get_running_loop().create_task(
            self._callback(), name=f"{self._name}_tick"
        )
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "timer_callback_failed",
                exc_info=exc,
                extra={
                    "component": _COMPONENT,
                    "timer": self._name,
                    "error_type": type(exc).__name__,
                },
            )


__all__ = ["AsyncioTimer"]
