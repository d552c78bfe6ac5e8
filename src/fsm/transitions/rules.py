"""
Regras de transição válidas entre fases de reconexão.

Este módulo define o grafo de transições do supervisor:
IDLE → PROBING → WAITING* → {RECOVERED | EXHAUSTED}.
"""

from fsm.states.reconnect import TERMINAL_PHASES, ReconnectPhase

TransitionMap = dict[ReconnectPhase, frozenset[ReconnectPhase]]

# Chave: fase de origem
# Valor: fases de destino permitidas
VALID_TRANSITIONS: TransitionMap = {
    # IDLE: só sai quando a sincronização detecta queda de rede
    ReconnectPhase.IDLE: frozenset({
        ReconnectPhase.PROBING,
    }),

    # PROBING: segundo tick já re-checa a rede
    ReconnectPhase.PROBING: frozenset({
        ReconnectPhase.WAITING,
        ReconnectPhase.RECOVERED,
        ReconnectPhase.EXHAUSTED,
        ReconnectPhase.IDLE,  # cancelado por sync manual
    }),

    # WAITING: loop até recuperar ou esgotar
    ReconnectPhase.WAITING: frozenset({
        ReconnectPhase.WAITING,
        ReconnectPhase.RECOVERED,
        ReconnectPhase.EXHAUSTED,
        ReconnectPhase.IDLE,  # cancelado por sync manual
    }),

    # Terminais: novo ciclo exige reset explícito
    ReconnectPhase.RECOVERED: frozenset(),
    ReconnectPhase.EXHAUSTED: frozenset(),
}


def get_valid_targets(phase: ReconnectPhase) -> frozenset[ReconnectPhase]:
    """
    Retorna as fases de destino válidas para uma fase de origem.

    Args:
        phase: Fase de origem

    Returns:
        Conjunto de fases de destino permitidas (vazio se terminal)
    """
    return VALID_TRANSITIONS.get(phase, frozenset())


def is_transition_valid(from_phase: ReconnectPhase, to_phase: ReconnectPhase) -> bool:
    """
    Verifica se uma transição é válida segundo as regras definidas.

    Args:
        from_phase: Fase de origem
        to_phase: Fase de destino

    Returns:
        True se a transição é permitida, False caso contrário
    """
    if from_phase in TERMINAL_PHASES:
        return False
    return to_phase in get_valid_targets(from_phase)

