"""
Módulo FSM — Máquina de estados do ciclo de reconexão.

Governa as fases que o supervisor percorre quando a conectividade
cai durante uma sincronização da caixa de entrada.

Estrutura:
    - states/: Fases (ReconnectPhase enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - rules/: Guards
    - manager/: Máquina de estados (ReconnectMachine)
    - types/: Tipos de dados (PhaseTransition, TransitionResult)
"""

from fsm.manager import (
    ReconnectMachine,
    create_reconnect_machine,
)
from fsm.rules import (
    GuardResult,
    evaluate_guards,
)
from fsm.states import (
    ACTIVE_PHASES,
    DEFAULT_INITIAL_PHASE,
    TERMINAL_PHASES,
    ReconnectPhase,
    is_active,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
)
from fsm.types import (
    PhaseTransition,
    TransitionResult,
)

__all__ = [
    "ACTIVE_PHASES",
    "DEFAULT_INITIAL_PHASE",
    "TERMINAL_PHASES",
    "VALID_TRANSITIONS",
    "GuardResult",
    "PhaseTransition",
    "ReconnectMachine",
    "ReconnectPhase",
    "TransitionResult",
    "create_reconnect_machine",
    "evaluate_guards",
    "get_valid_targets",
    "is_active",
    "is_transition_valid",
]
