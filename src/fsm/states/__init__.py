"""
Exports públicos do módulo fsm/states.

Fases canônicas do ciclo de reconexão.
"""

from fsm.states.reconnect import (
    ACTIVE_PHASES,
    DEFAULT_INITIAL_PHASE,
    TERMINAL_PHASES,
    ReconnectPhase,
    is_active,
)

__all__ = [
    "ACTIVE_PHASES",
    "DEFAULT_INITIAL_PHASE",
    "TERMINAL_PHASES",
    "ReconnectPhase",
    "is_active",
]
