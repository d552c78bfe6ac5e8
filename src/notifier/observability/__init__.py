"""Observabilidade — pass_id e métricas via logs estruturados.

Uso:
    from notifier.observability import get_pass_id, set_pass_id
    from notifier.observability import record_sync_pass, record_reconnect_attempt
"""

from notifier.observability.correlation import (
    generate_pass_id,
    get_pass_id,
    reset_pass_id,
    set_pass_id,
)
from notifier.observability.metrics import (
    record_notification,
    record_reconnect_attempt,
    record_sync_pass,
)

__all__ = [
    "generate_pass_id",
    "get_pass_id",
    "record_notification",
    "record_reconnect_attempt",
    "record_sync_pass",
    "reset_pass_id",
    "set_pass_id",
]
