"""
Máquina de estados do supervisor de reconexão.

Controla a fase atual, valida transições e mantém o histórico
do ciclo corrente, registrado nos logs de fim de ciclo.
"""

from typing import Any

from fsm.rules.guards import GuardResult, evaluate_guards
from fsm.states.reconnect import DEFAULT_INITIAL_PHASE, ReconnectPhase, is_active
from fsm.transitions.rules import is_transition_valid
from fsm.types.transition import PhaseTransition, TransitionResult


class ReconnectMachine:
    """
    Máquina de estados de um ciclo de reconexão.

    Attributes:
        current_phase: Fase atual da máquina
    """

    __slots__ = ("_current_phase", "_history")

    def __init__(self, initial_phase: ReconnectPhase | None = None) -> None:
        self._current_phase = initial_phase or DEFAULT_INITIAL_PHASE
        self._history: list[PhaseTransition] = []

    @property
    def current_phase(self) -> ReconnectPhase:
        """Fase atual da máquina."""
        return self._current_phase

    @property
    def is_active(self) -> bool:
        """Verifica se há reconexão em andamento (timer de retry armado)."""
        return is_active(self._current_phase)

    def transition(
        self,
        target: ReconnectPhase,
        trigger: str,
        attempt: int = 0,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de fase.

        Args:
            target: Fase de destino
            trigger: Identificador do gatilho (ex: 'connectivity_lost', 'retry_tick')
            attempt: Número da tentativa corrente
            metadata: Dados adicionais para auditoria

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_phase, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_phase.name} → {target.name}"
                ),
            )

        guard_result: GuardResult = evaluate_guards(self._current_phase, target)
        if not guard_result.allowed:
            return TransitionResult(
                success=False,
                error_reason=guard_result.reason,
            )

        transition = PhaseTransition(
            from_phase=self._current_phase,
            to_phase=target,
            trigger=trigger,
            attempt=attempt,
            metadata=metadata or {},
        )

        self._current_phase = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Retorna histórico do ciclo em formato seguro para logs."""
        return [t.to_log_dict() for t in self._history]

    def reset(self) -> None:
        """Volta a IDLE e limpa o histórico para um novo ciclo."""
        self._current_phase = DEFAULT_INITIAL_PHASE
        self._history = []


def create_reconnect_machine(
    initial_phase: ReconnectPhase | None = None,
) -> ReconnectMachine:
    """Factory da máquina de reconexão."""
    return ReconnectMachine(initial_phase=initial_phase)
