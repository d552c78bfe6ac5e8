"""Timers sobre o event loop."""

from notifier.infra.scheduling.asyncio_timer import AsyncioTimer

__all__ = ["AsyncioTimer"]
