"""Supervisor de reconexao.

Assume o controle quando a sincronizacao detecta queda de rede:
tentativas limitadas em intervalo fixo ate a rede voltar (RECOVERED)
ou as tentativas se esgotarem (EXHAUSTED), devolvendo o controle ao
polling normal em ambos os casos.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fsm import ReconnectMachine, ReconnectPhase, create_reconnect_machine
from notifier.domain.state import (
    SYNC_AFFORDANCES,
    Affordance,
    ReconnectState,
    StatusKind,
)
from notifier.observability import record_reconnect_attempt

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from notifier.domain.state import SyncState
    from notifier.protocols.connectivity import ConnectivityGateProtocol
    from notifier.protocols.presenter import PresenterProtocol
    from notifier.protocols.timer import TimerProtocol
    from notifier.services.schedule_controller import ScheduleController

logger = logging.getLogger(__name__)

_COMPONENT = "reconnection_supervisor"


class ReconnectionSupervisor:
    """Ciclo IDLE → PROBING → WAITING* → {RECOVERED | EXHAUSTED}.

    O contador de tentativas vive em SyncState.reconnection_attempts,
    recebido por referencia do SyncEngine.
    """

    __slots__ = (
        "_connectivity",
        "_interval",
        "_machine",
        "_max_attempts",
        "_presenter",
        "_probing",
        "_schedule",
        "_state",
        "_sync",
        "_timer",
    )

    def __init__(
        self,
        *,
        state: SyncState,
        timer: TimerProtocol,
        connectivity: ConnectivityGateProtocol,
        schedule: ScheduleController,
        presenter: PresenterProtocol,
        interval_seconds: float,
        max_attempts: int,
        machine: ReconnectMachine | None = None,
    ) -> None:
        if max_attempts < 2:
            raise ValueError("max_attempts deve ser >= 2")
        self._state = state
        self._timer = timer
        self._connectivity = connectivity
        self._schedule = schedule
        self._presenter = presenter
        self._interval = float(interval_seconds)
        self._max_attempts = max_attempts
        self._machine = machine or create_reconnect_machine()
        self._sync: Callable[..., Awaitable[None]] | None = None
        self._probing = False

    def attach(self, sync: Callable[..., Awaitable[None]]) -> None:
        """Conecta a sincronizacao executada ao recuperar a rede."""
        self._sync = sync

    @property
    def phase(self) -> ReconnectPhase:
        return self._machine.current_phase

    @property
    def machine(self) -> ReconnectMachine:
        return self._machine

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def snapshot(self) -> ReconnectState:
        return ReconnectState(
            attempts=self._state.reconnection_attempts,
            active=self._machine.is_active,
        )

    def start(self) -> None:
        """Primeira tentativa: arma o retry sem re-checar a rede.

        A passada que acionou o supervisor acabou de confirmar a queda.
        """
        self._machine.reset()
        self._state.reconnection_attempts = 1
        self._transition(ReconnectPhase.PROBING, "connectivity_lost", 1)

        self._presenter.set_affordances(SYNC_AFFORDANCES, False)
        self._presenter.set_status(StatusKind.RECONNECTING)
        self._timer.rearm(self._interval)

        record_reconnect_attempt(1, "armed")
        logger.warning(
            "reconnection_started",
            extra={
                "component": _COMPONENT,
                "interval_seconds": self._interval,
                "max_attempts": self._max_attempts,
            },
        )

    async def tick(self) -> None:
        """Callback do timer de retry: re-checa a rede a partir da segunda tentativa."""
        if not self._machine.is_active:
            # Tick atrasado apos cancelamento
            self._timer.cancel()
            return
        if self._probing:
            # Sonda anterior ainda pendente; um tick por vez
            return

        self._state.reconnection_attempts += 1
        attempt = self._state.reconnection_attempts

        self._probing = True
        try:
            available = await self._connectivity.is_available()
        finally:
            self._probing = False

        # Sync manual durante a sonda encerra ou reinicia o ciclo
        if not self._machine.is_active or self._state.reconnection_attempts != attempt:
            logger.info(
                "reconnection_tick_discarded",
                extra={"component": _COMPONENT, "attempt": attempt},
            )
            return

        if available:
            await self._recover(attempt)
            return

        if attempt >= self._max_attempts:
            self._exhaust(attempt)
            return

        if self._transition(ReconnectPhase.WAITING, "retry_tick", attempt):
            record_reconnect_attempt(attempt, "waiting")

    def cancel(self) -> bool:
        """Cancela o ciclo em andamento (sync manual).

        Returns:
            True se havia reconexao ativa.
        """
        self._timer.cancel()
        if not self._machine.is_active:
            return False
        if not self._transition(ReconnectPhase.IDLE, "manual_sync"):
            return False
        logger.info("reconnection_cancelled", extra={"component": _COMPONENT})
        return True

    def _transition(self, target: ReconnectPhase, trigger: str, attempt: int = 0) -> bool:
        result = self._machine.transition(target, trigger, attempt=attempt)
        if not result.success:
            logger.warning(
                "reconnection_transition_rejected",
                extra={
                    "component": _COMPONENT,
                    "phase": self._machine.current_phase.name,
                    "target": target.name,
                    "reason": result.error_reason,
                },
            )
        return result.success

    async def _recover(self, attempt: int) -> None:
        if not self._transition(ReconnectPhase.RECOVERED, "connectivity_restored", attempt):
            return
        self._timer.cancel()
        self._schedule.resume_polling()
        record_reconnect_attempt(attempt, "recovered")
        logger.info(
            "reconnection_recovered",
            extra={
                "component": _COMPONENT,
                "attempt": attempt,
                "history": self._machine.get_history_summary(),
            },
        )
        if self._sync is not None:
            await self._sync()

    def _exhaust(self, attempt: int) -> None:
        if not self._transition(ReconnectPhase.EXHAUSTED, "max_attempts_reached", attempt):
            return
        self._timer.cancel()
        self._schedule.resume_polling()

        # Apenas o sync manual volta; timeout/settings aguardam uma passada com sucesso
        self._presenter.set_affordances((Affordance.SYNC,), True)
        self._presenter.set_status(StatusKind.RECONNECT_FAILED)
        self._presenter.stamp_sync_time(self._state.last_sync_time)

        record_reconnect_attempt(attempt, "exhausted")
        logger.warning(
            "reconnection_exhausted",
            extra={
                "component": _COMPONENT,
                "attempt": attempt,
                "history": self._machine.get_history_summary(),
            },
        )


__all__ = ["ReconnectionSupervisor"]
