"""Gate de atualizacao consultado pelo SyncEngine.

Guarda a flag "atualizando" que bloqueia a sincronizacao e decide,
a cada ping, se o periodo de verificacao expirou. A verificacao em si
(download, instalador) e injetada como callback.
"""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timedelta
from enum import StrEnum
from typing import TYPE_CHECKING

from notifier.protocols.update_gate import UpdateGateProtocol

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_COMPONENT = "update_gate"


class UpdatePeriod(StrEnum):
    STARTUP = "startup"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


def _now() -> datetime:
    return datetime.now().astimezone()


def add_months(moment: datetime, months: int) -> datetime:
    """Soma meses preservando o dia quando possivel (31/01 + 1 → 28 ou 29/02)."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def next_check_due(last_check: datetime, period: UpdatePeriod) -> datetime | None:
    """Proximo instante de verificacao; None quando so verifica no startup."""
    if period is UpdatePeriod.DAY:
        return last_check + timedelta(days=1)
    if period is UpdatePeriod.WEEK:
        return last_check + timedelta(days=7)
    if period is UpdatePeriod.MONTH:
        return add_months(last_check, 1)
    return None


class PeriodicUpdateGate(UpdateGateProtocol):
    __slots__ = ("_check", "_clock", "_enabled", "_last_check", "_period", "_updating")

    def __init__(
        self,
        *,
        enabled: bool = True,
        period: UpdatePeriod = UpdatePeriod.WEEK,
        check: Callable[[], None] | None = None,
        last_check: datetime | None = None,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        self._enabled = enabled
        self._period = period
        self._check = check
        self._clock = clock
        self._last_check = last_check or clock()
        self._updating = False

    @property
    def last_check(self) -> datetime:
        return self._last_check

    @property
    def is_period_set_to_startup(self) -> bool:
        return self._period is UpdatePeriod.STARTUP

    def is_updating(self) -> bool:
        return self._updating

    def begin_update(self) -> None:
        """Marca atualizacao em andamento; sincronizacoes viram no-op."""
        self._updating = True
        logger.info("update_started", extra={"component": _COMPONENT})

    def end_update(self) -> None:
        self._updating = False
        logger.info("update_finished", extra={"component": _COMPONENT})

    def ping(self) -> None:
        """Dispara a verificacao se o periodo configurado expirou."""
        if not self._enabled or self._check is None:
            return

        due = next_check_due(self._last_check, self._period)
        now = self._clock()
        if due is None or now < due:
            return

        self._last_check = now
        logger.info(
            "update_check_triggered",
            extra={"component": _COMPONENT, "period": self._period.value},
        )
        self._check()


__all__ = ["PeriodicUpdateGate", "UpdatePeriod", "add_months", "next_check_due"]
