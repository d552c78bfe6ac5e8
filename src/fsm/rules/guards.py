"""
Guards para transições de fase de reconexão.

Guards são regras adicionais que podem bloquear transições
estruturalmente válidas.
"""

from fsm.states.reconnect import TERMINAL_PHASES, ReconnectPhase


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


def guard_valid_phase(
    from_phase: ReconnectPhase,
    to_phase: ReconnectPhase,
) -> GuardResult:
    """Guard: ambas as fases devem pertencer ao enum."""
    if not isinstance(from_phase, ReconnectPhase):
        return GuardResult.deny(f"Fase de origem inválida: {from_phase}")

    if not isinstance(to_phase, ReconnectPhase):
        return GuardResult.deny(f"Fase de destino inválida: {to_phase}")

    return GuardResult.allow()


def guard_terminal_phase(
    from_phase: ReconnectPhase,
    to_phase: ReconnectPhase,
) -> GuardResult:
    """Guard: fases terminais não permitem saída (usar reset)."""
    del to_phase
    if from_phase in TERMINAL_PHASES:
        return GuardResult.deny(
            f"Fase {from_phase.name} é terminal, não permite transição"
        )
    return GuardResult.allow()


def guard_same_phase(
    from_phase: ReconnectPhase,
    to_phase: ReconnectPhase,
) -> GuardResult:
    """
    Guard: transição reflexiva só é permitida em WAITING.

    Cada tick sem rede mantém o supervisor em WAITING.
    """
    if from_phase == ReconnectPhase.WAITING:
        return GuardResult.allow()

    if from_phase == to_phase:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_phase.name} → {to_phase.name}"
        )

    return GuardResult.allow()


# Aplicados em ordem; todos devem retornar allow()
DEFAULT_GUARDS = [
    guard_valid_phase,
    guard_terminal_phase,
    guard_same_phase,
]


def evaluate_guards(
    from_phase: ReconnectPhase,
    to_phase: ReconnectPhase,
    guards: list | None = None,
) -> GuardResult:
    """
    Avalia todos os guards para uma transição.

    Args:
        from_phase: Fase de origem
        to_phase: Fase de destino
        guards: Lista de guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_phase, to_phase)
        if not result.allowed:
            return result

    return GuardResult.allow()
