"""Estado explicito da sincronizacao.

O SyncEngine e dono do SyncState e o repassa por referencia ao
supervisor de reconexao, que apenas avanca reconnection_attempts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

SPAM_CONTEXT_TAG = "#spam"
INBOX_CONTEXT_TAG = "#inbox"


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(slots=True)
class SyncState:
    """Estado mutavel entre passadas.

    Attributes:
        last_sync_time: Inicio da ultima passada (inclusive as abortadas por guard)
        unread_count: Threads nao lidas na ultima passada completa (None = desconhecido)
        last_context_tag: Tag da ultima notificacao ("#spam", "#inbox/<id>")
        reconnection_attempts: Tentativas do ciclo de reconexao (0 = ocioso)
        email_address: Endereco da conta, consultado uma vez
    """

    last_sync_time: datetime = field(default_factory=_now)
    unread_count: int | None = None
    last_context_tag: str | None = None
    reconnection_attempts: int = 0
    email_address: str | None = None


@dataclass(frozen=True, slots=True)
class ReconnectState:
    """Fotografia do ciclo de reconexao exposta pelo supervisor."""

    attempts: int = 0
    active: bool = False


class StatusKind(StrEnum):
    """Status sinalizado ao adaptador de apresentacao."""

    SYNCING = "syncing"
    HAS_MAIL = "has_mail"
    RECONNECTING = "reconnecting"
    RECONNECT_FAILED = "reconnect_failed"
    MARK_AS_READ_ERROR = "mark_as_read_error"
    PAUSED = "paused"


class Affordance(StrEnum):
    """Comandos do usuario habilitados/desabilitados pelo core."""

    SYNC = "sync"
    TIMEOUT = "timeout"
    SETTINGS = "settings"
    MARK_AS_READ = "mark_as_read"


# Comandos bloqueados durante reconexao e liberados numa passada normal
SYNC_AFFORDANCES: tuple[Affordance, ...] = (
    Affordance.SYNC,
    Affordance.TIMEOUT,
    Affordance.SETTINGS,
)


__all__ = [
    "INBOX_CONTEXT_TAG",
    "SPAM_CONTEXT_TAG",
    "SYNC_AFFORDANCES",
    "Affordance",
    "ReconnectState",
    "StatusKind",
    "SyncState",
]
