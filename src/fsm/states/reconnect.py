"""
Fases canônicas do ciclo de reconexão.

Este módulo define as fases que o supervisor de reconexão pode assumir
quando a conectividade cai durante uma sincronização.
"""

from enum import StrEnum


class ReconnectPhase(StrEnum):
    """
    Fases de um ciclo de reconexão.

    Fases não-terminais:
        - IDLE: Nenhuma queda detectada, polling normal
        - PROBING: Primeira tentativa armada (sem nova checagem de rede)
        - WAITING: Tentativas seguintes, re-checando a rede a cada tick

    Fases terminais (fim do ciclo, exigem reset para novo ciclo):
        - RECOVERED: Rede voltou, sincronização normal retomada
        - EXHAUSTED: Tentativas esgotadas, aguardando o próximo poll
    """

    IDLE = "IDLE"
    PROBING = "PROBING"
    WAITING = "WAITING"

    RECOVERED = "RECOVERED"
    EXHAUSTED = "EXHAUSTED"

    def __str__(self) -> str:
        return self.value


TERMINAL_PHASES: frozenset[ReconnectPhase] = frozenset({
    ReconnectPhase.RECOVERED,
    ReconnectPhase.EXHAUSTED,
})

# Fases em que o timer de retry está armado
ACTIVE_PHASES: frozenset[ReconnectPhase] = frozenset({
    ReconnectPhase.PROBING,
    ReconnectPhase.WAITING,
})

DEFAULT_INITIAL_PHASE: ReconnectPhase = ReconnectPhase.IDLE


def is_active(phase: ReconnectPhase) -> bool:
    """Verifica se há reconexão em andamento."""
    return phase in ACTIVE_PHASES

