"""Abstracao de timer usada pelo polling e pela reconexao.

Desacopla o agendamento do mecanismo concreto para que testes
disparem ticks de forma sincrona.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TimerProtocol(Protocol):
    @property
    def interval(self) -> float:
        """Intervalo corrente em segundos."""
        ...

    @property
    def armed(self) -> bool:
        """True se ha um disparo agendado."""
        ...

    def arm(self, interval: float) -> None:
        """Agenda disparos recorrentes a cada `interval` segundos a partir de agora."""
        ...

    def rearm(self, interval: float) -> None:
        """Cancela o agendamento corrente e arma com o novo intervalo."""
        ...

    def cancel(self) -> None:
        """Cancela disparos futuros."""
        ...

    def fire_now(self) -> None:
        """Agenda um disparo imediato sem alterar o agendamento recorrente."""
        ...
