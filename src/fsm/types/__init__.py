"""
Exports públicos do módulo fsm/types.
"""

from fsm.types.transition import PhaseTransition, TransitionResult

__all__ = [
    "PhaseTransition",
    "TransitionResult",
]
