"""Controle do polling recorrente e da pausa ("timeout") de notificacoes.

O controller e dono do timer de polling. Pausar com duracao reprograma
o timer para o fim da pausa; o tick seguinte retoma o polling e dispara
uma sincronizacao.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from notifier.domain.state import StatusKind

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from notifier.protocols.presenter import PresenterProtocol
    from notifier.protocols.timer import TimerProtocol

    SyncCallback = Callable[..., Awaitable[None]]

logger = logging.getLogger(__name__)

_COMPONENT = "schedule_controller"

# Opcoes de pausa oferecidas no menu (None = ate retomar manualmente)
PAUSE_PRESETS: dict[str, timedelta | None] = {
    "30m": timedelta(minutes=30),
    "1h": timedelta(hours=1),
    "2h": timedelta(hours=2),
    "5h": timedelta(hours=5),
    "indefinitely": None,
}


@dataclass(frozen=True, slots=True)
class Active:
    interval: float


@dataclass(frozen=True, slots=True)
class Paused:
    until: datetime | None


ScheduleMode = Active | Paused


def _now() -> datetime:
    return datetime.now().astimezone()


class ScheduleController:
    """Dono do timer de polling e do sub-estado Active/Paused."""

    __slots__ = (
        "_clock",
        "_interval",
        "_mode",
        "_presenter",
        "_resume_pending",
        "_sync",
        "_timer",
    )

    def __init__(
        self,
        timer: TimerProtocol,
        interval_seconds: float,
        *,
        presenter: PresenterProtocol | None = None,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds deve ser > 0")
        self._timer = timer
        self._interval = float(interval_seconds)
        self._mode: ScheduleMode = Active(self._interval)
        self._presenter = presenter
        self._clock = clock
        self._sync: SyncCallback | None = None
        self._resume_pending = False

    def attach(self, sync: SyncCallback) -> None:
        """Conecta a corrotina de sincronizacao disparada pelos ticks."""
        self._sync = sync

    @property
    def mode(self) -> ScheduleMode:
        return self._mode

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_paused(self) -> bool:
        return isinstance(self._mode, Paused)

    @property
    def paused_until(self) -> datetime | None:
        return self._mode.until if isinstance(self._mode, Paused) else None

    def start(self) -> None:
        """Arma o polling recorrente (sem efeito durante pausa)."""
        if not self.is_paused:
            self._timer.arm(self._interval)

    def stop(self) -> None:
        """Interrompe o polling enquanto o supervisor de reconexao atua."""
        self._timer.cancel()
        logger.info("polling_stopped", extra={"component": _COMPONENT})

    def resume_polling(self) -> None:
        """Devolve o controle ao polling apos um ciclo de reconexao."""
        if isinstance(self._mode, Active):
            self._timer.rearm(self._interval)
            return
        remaining = self._remaining_pause()
        if remaining is not None:
            self._timer.rearm(max(remaining, 1.0))

    def pause(self, duration: timedelta | None) -> None:
        """Pausa notificacoes.

        Args:
            duration: Duracao da pausa; None pausa ate `resume()` manual.
        """
        if duration is not None and duration.total_seconds() <= 0:
            raise ValueError("duration deve ser positiva")

        until = self._clock() + duration if duration is not None else None
        self._mode = Paused(until)
        self._resume_pending = False
        if duration is None:
            self._timer.cancel()
        else:
            self._timer.rearm(duration.total_seconds())

        if self._presenter is not None:
            self._presenter.set_status(StatusKind.PAUSED)
        logger.info(
            "notifications_paused",
            extra={
                "component": _COMPONENT,
                "until": until.isoformat() if until else None,
            },
        )

    def pause_preset(self, name: str) -> None:
        """Pausa usando uma das opcoes de PAUSE_PRESETS."""
        if name not in PAUSE_PRESETS:
            raise ValueError(f"Pausa desconhecida: {name}")
        self.pause(PAUSE_PRESETS[name])

    def resume(self) -> None:
        """Retoma o polling e agenda uma sincronizacao imediata."""
        self._mode = Active(self._interval)
        self._resume_pending = True
        self._timer.rearm(self._interval)
        self._timer.fire_now()
        logger.info("notifications_resumed", extra={"component": _COMPONENT})

    def set_interval(self, interval_seconds: float) -> None:
        """Altera o intervalo; com polling ativo, o proximo tick conta a partir de agora."""
        if interval_seconds <= 0:
            raise ValueError("interval_seconds deve ser > 0")
        self._interval = float(interval_seconds)
        if isinstance(self._mode, Active):
            self._mode = Active(self._interval)
            if self._timer.armed:
                self._timer.rearm(self._interval)
        logger.info(
            "poll_interval_changed",
            extra={"component": _COMPONENT, "interval_seconds": self._interval},
        )

    async def on_tick(self) -> None:
        """Callback do timer de polling."""
        if isinstance(self._mode, Paused):
            remaining = self._remaining_pause()
            if remaining is None:
                return
            if remaining > 0:
                self._timer.rearm(remaining)
                return
            self.resume()
            return

        if self._sync is None:
            logger.warning("poll_tick_without_sync", extra={"component": _COMPONENT})
            return

        # A sincronizacao pedida pelo resume() e tratada como manual
        manual = self._resume_pending
        self._resume_pending = False
        await self._sync(manual=manual)

    def _remaining_pause(self) -> float | None:
        until = self.paused_until
        if until is None:
            return None
        return max((until - self._clock()).total_seconds(), 0.0)


__all__ = [
    "PAUSE_PRESETS",
    "Active",
    "Paused",
    "ScheduleController",
    "ScheduleMode",
]
