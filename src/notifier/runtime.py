"""Runtime do daemon: liga timers, controller, supervisor e engine.

Expõe os comandos do usuário (sincronizar, marcar como lido, pausar,
retomar, aplicar preferências) e roda até SIGINT/SIGTERM.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import webbrowser
from typing import TYPE_CHECKING

from notifier.domain.state import SyncState
from notifier.infra.scheduling import AsyncioTimer
from notifier.infra.surface import LoggingStatusSurface
from notifier.presentation import StatusPresenter
from notifier.services import (
    PeriodicUpdateGate,
    ReconnectionSupervisor,
    ScheduleController,
    SyncEngine,
    UpdatePeriod,
)
from notifier.services.notification_policy import context_url

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine
    from typing import Any

    from config.settings import SyncSettings, UpdateSettings
    from notifier.protocols.auth_session import AuthSessionProtocol
    from notifier.protocols.connectivity import ConnectivityGateProtocol
    from notifier.protocols.mail_client import MailClientProtocol
    from notifier.protocols.status_surface import StatusSurfaceProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "runtime"


class NotifierRuntime:
    """Composition dos componentes do core sobre o event loop."""

    def __init__(
        self,
        *,
        sync_settings: SyncSettings,
        update_settings: UpdateSettings,
        web_base_url: str,
        mail_client_factory: Callable[[], MailClientProtocol],
        connectivity: ConnectivityGateProtocol,
        auth: AuthSessionProtocol,
        surface: StatusSurfaceProtocol | None = None,
        update_check: Callable[[], None] | None = None,
    ) -> None:
        self._web_base_url = web_base_url
        self._connectivity = connectivity
        self._state = SyncState()
        self._surface = surface or LoggingStatusSurface()
        self._presenter = StatusPresenter(
            self._surface, unstack_boundary=sync_settings.unstack_boundary
        )
        self._poll_timer = AsyncioTimer(self._on_poll_tick, name="poll")
        self._retry_timer = AsyncioTimer(self._on_retry_tick, name="reconnect")
        self._schedule = ScheduleController(
            self._poll_timer,
            sync_settings.poll_interval_seconds,
            presenter=self._presenter,
        )
        self._supervisor = ReconnectionSupervisor(
            state=self._state,
            timer=self._retry_timer,
            connectivity=connectivity,
            schedule=self._schedule,
            presenter=self._presenter,
            interval_seconds=sync_settings.reconnect_interval_seconds,
            max_attempts=sync_settings.max_reconnect_attempts,
        )
        self._update_gate = PeriodicUpdateGate(
            enabled=update_settings.enabled,
            period=UpdatePeriod(update_settings.period),
            check=update_check or self._log_update_due,
        )
        self._engine = SyncEngine(
            mail_client_factory=mail_client_factory,
            connectivity=connectivity,
            auth=auth,
            update_gate=self._update_gate,
            presenter=self._presenter,
            schedule=self._schedule,
            supervisor=self._supervisor,
            settings=sync_settings,
            state=self._state,
        )
        self._schedule.attach(self._engine.run)
        self._supervisor.attach(self._engine.run)
        self._stop_event: asyncio.Event | None = None
        self._commands: set[asyncio.Task[None]] = set()

    @property
    def engine(self) -> SyncEngine:
        return self._engine

    @property
    def schedule(self) -> ScheduleController:
        return self._schedule

    @property
    def supervisor(self) -> ReconnectionSupervisor:
        return self._supervisor

    @property
    def presenter(self) -> StatusPresenter:
        return self._presenter

    @property
    def update_gate(self) -> PeriodicUpdateGate:
        return self._update_gate

    @property
    def state(self) -> SyncState:
        return self._state

    async def start(self) -> None:
        """Arma o polling e executa a primeira passada renovando o token."""
        self._schedule.start()
        await self._engine.run(refresh_token_first=True)

    async def sync_now(self) -> None:
        await self._engine.run(manual=True)

    async def mark_as_read(self) -> None:
        await self._engine.mark_as_read()

    def pause(self, preset: str) -> None:
        self._schedule.pause_preset(preset)

    def resume(self) -> None:
        self._schedule.resume()

    def apply_settings(self, settings: SyncSettings) -> None:
        """Aplica novas preferências; o intervalo vale a partir de agora.

        Ligar ou desligar a notificação de spam dispara uma sincronização
        imediata para refletir a mudança no status.
        """
        errors = settings.validate()
        if errors:
            raise ValueError("; ".join(errors))
        spam_toggled = settings.spam_notification != self._engine.settings.spam_notification
        self._engine.apply_settings(settings)
        self._schedule.set_interval(settings.poll_interval_seconds)
        if spam_toggled:
            self._spawn_command(self.sync_now)

    def context_url(self) -> str:
        return context_url(self._state.last_context_tag, self._web_base_url)

    def open_context_url(self) -> bool:
        """Abre no navegador a view da última notificação."""
        return webbrowser.open(self.context_url())

    async def run(self) -> None:
        """Roda até SIGINT/SIGTERM; SIGUSR1 dispara sincronização manual."""
        loop = asyncio.get_running_loop()
        self._stop_event = asyncio.Event()
        loop.add_signal_handler(signal.SIGINT, self.request_stop)
        loop.add_signal_handler(signal.SIGTERM, self.request_stop)
        loop.add_signal_handler(signal.SIGUSR1, self._spawn_command, self.sync_now)

        logger.info("runtime_started", extra={"component": _COMPONENT})
        try:
            await self.start()
            await self._stop_event.wait()
        finally:
            for sig in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
                loop.remove_signal_handler(sig)
            await self.shutdown()

    def request_stop(self) -> None:
        if self._stop_event is not None:
            self._stop_event.set()

    async def shutdown(self) -> None:
        self._poll_timer.cancel()
        self._retry_timer.cancel()
        if self._commands:
            await asyncio.gather(*tuple(self._commands), return_exceptions=True)
        await self._poll_timer.drain()
        await self._retry_timer.drain()
        aclose = getattr(self._connectivity, "aclose", None)
        if aclose is not None:
            await aclose()
        logger.info("runtime_stopped", extra={"component": _COMPONENT})

    async def _on_poll_tick(self) -> None:
        await self._schedule.on_tick()

    async def _on_retry_tick(self) -> None:
        await self._supervisor.tick()

    def _spawn_command(self, command: Callable[[], Coroutine[Any, Any, None]]) -> None:
        task = asyncio.get_running_loop().create_task(command())
        self._commands.add(task)
        task.add_done_callback(self._commands.discard)

    def _log_update_due(self) -> None:
        logger.info("update_check_due", extra={"component": _COMPONENT})


__all__ = ["NotifierRuntime"]
