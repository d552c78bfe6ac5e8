"""Negacoes da ReconnectMachine: reflexiva fora de WAITING e guard customizado."""

from __future__ import annotations

import fsm.manager.machine as machine_module
from fsm import ReconnectPhase, create_reconnect_machine
from fsm.rules.guards import GuardResult, guard_same_phase


def test_probing_cannot_repeat_itself() -> None:
    machine = create_reconnect_machine()
    machine.transition(ReconnectPhase.PROBING, "connectivity_lost", attempt=1)

    result = machine.transition(ReconnectPhase.PROBING, "retry_tick", attempt=2)

    assert result.success is False
    assert machine.current_phase is ReconnectPhase.PROBING
    assert len(machine.get_history_summary()) == 1


def test_reflexive_guard_blocks_probing_but_not_waiting() -> None:
    denied = guard_same_phase(ReconnectPhase.PROBING, ReconnectPhase.PROBING)

    assert denied.allowed is False
    assert "PROBING" in denied.reason
    assert guard_same_phase(ReconnectPhase.WAITING, ReconnectPhase.WAITING).allowed


def test_waiting_loop_is_refused_when_guards_deny(monkeypatch) -> None:
    def _offline_lock(from_phase: ReconnectPhase, to_phase: ReconnectPhase) -> GuardResult:
        if from_phase is ReconnectPhase.WAITING and to_phase is ReconnectPhase.WAITING:
            return GuardResult.deny("retry_budget_frozen")
        return GuardResult.allow()

    monkeypatch.setattr(machine_module, "evaluate_guards", _offline_lock)
    machine = create_reconnect_machine(initial_phase=ReconnectPhase.WAITING)

    result = machine.transition(ReconnectPhase.WAITING, "retry_tick", attempt=3)

    assert result.success is False
    assert result.error_reason == "retry_budget_frozen"
    assert machine.get_history_summary() == []
    assert machine.transition(ReconnectPhase.EXHAUSTED, "max_attempts", attempt=3).success
