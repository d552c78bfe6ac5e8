"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import (
    ReconnectMachine,
    create_reconnect_machine,
)

__all__ = [
    "ReconnectMachine",
    "create_reconnect_machine",
]
