"""
Exports públicos do módulo fsm/rules.

Guards para transições de fase.
"""

from fsm.rules.guards import (
    DEFAULT_GUARDS,
    GuardResult,
    evaluate_guards,
    guard_same_phase,
    guard_terminal_phase,
    guard_valid_phase,
)

__all__ = [
    "DEFAULT_GUARDS",
    "GuardResult",
    "evaluate_guards",
    "guard_same_phase",
    "guard_terminal_phase",
    "guard_valid_phase",
]
