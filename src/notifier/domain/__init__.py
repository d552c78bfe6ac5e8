"""Modelos de dominio: caixa, intencoes e estado da sincronizacao."""

from notifier.domain.intents import (
    ClearedIntent,
    ErrorIntent,
    NotificationIntent,
    PrivacyLevel,
    SoundKind,
    SpamIntent,
    UnreadManyIntent,
    UnreadSingleIntent,
)
from notifier.domain.mailbox import (
    LabelCounts,
    MailboxSnapshot,
    MailboxStatistics,
    MessagePayload,
    MessageSummary,
)
from notifier.domain.state import (
    INBOX_CONTEXT_TAG,
    SPAM_CONTEXT_TAG,
    SYNC_AFFORDANCES,
    Affordance,
    ReconnectState,
    StatusKind,
    SyncState,
)

__all__ = [
    "INBOX_CONTEXT_TAG",
    "SPAM_CONTEXT_TAG",
    "SYNC_AFFORDANCES",
    "Affordance",
    "ClearedIntent",
    "ErrorIntent",
    "LabelCounts",
    "MailboxSnapshot",
    "MailboxStatistics",
    "MessagePayload",
    "MessageSummary",
    "NotificationIntent",
    "PrivacyLevel",
    "ReconnectState",
    "SoundKind",
    "SpamIntent",
    "StatusKind",
    "SyncState",
    "UnreadManyIntent",
    "UnreadSingleIntent",
]
