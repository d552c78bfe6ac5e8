"""
Exports públicos do módulo fsm/transitions.

Regras de transição válidas entre fases de reconexão.
"""

from fsm.transitions.rules import (
    VALID_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
)

__all__ = [
    "VALID_TRANSITIONS",
    "TransitionMap",
    "get_valid_targets",
    "is_transition_valid",
]
