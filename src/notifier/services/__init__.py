"""Serviços do core de sincronização.

Orquestração sem IO direto; clients concretos ficam em notifier/infra/.
"""

from notifier.services.reconnection_supervisor import ReconnectionSupervisor
from notifier.services.schedule_controller import PAUSE_PRESETS, ScheduleController
from notifier.services.sync_engine import SyncEngine
from notifier.services.update_gate import PeriodicUpdateGate, UpdatePeriod

__all__ = [
    "PAUSE_PRESETS",
    "PeriodicUpdateGate",
    "ReconnectionSupervisor",
    "ScheduleController",
    "SyncEngine",
    "UpdatePeriod",
]
