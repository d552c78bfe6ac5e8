"""Intencoes de notificacao produzidas a cada passada.

Cada passada produz no maximo uma intencao, consumida imediatamente
pelo adaptador de apresentacao e nunca retida pelo core.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

from notifier.domain.mailbox import MessageSummary  # noqa: TC001


class PrivacyLevel(StrEnum):
    """Nivel de detalhe revelado numa notificacao de mensagem unica.

    FULL: remetente e assunto.
    HIDDEN_NAMES: remetente e previa do corpo no lugar do assunto.
    NONE: apenas contagem agregada e texto generico.
    """

    FULL = "full"
    HIDDEN_NAMES = "hidden_names"
    NONE = "none"


class SoundKind(StrEnum):
    """Som solicitado junto com a notificacao (asset escolhido fora do core)."""

    ASTERISK = "asterisk"
    EXCLAMATION = "exclamation"


@dataclass(frozen=True, slots=True)
class SpamIntent:
    count: int
    sound: SoundKind | None = None
    kind: Literal["spam"] = field(default="spam", init=False)


@dataclass(frozen=True, slots=True)
class UnreadSingleIntent:
    """Mensagem unica nao lida; title/body ja respeitam o nivel de privacidade."""

    message: MessageSummary
    privacy: PrivacyLevel
    title: str
    body: str
    sound: SoundKind | None = None
    kind: Literal["unread_single"] = field(default="unread_single", init=False)


@dataclass(frozen=True, slots=True)
class UnreadManyIntent:
    count: int
    sound: SoundKind | None = None
    kind: Literal["unread_many"] = field(default="unread_many", init=False)


@dataclass(frozen=True, slots=True)
class ClearedIntent:
    sound: SoundKind | None = None
    kind: Literal["cleared"] = field(default="cleared", init=False)


@dataclass(frozen=True, slots=True)
class ErrorIntent:
    message: str
    sound: SoundKind | None = None
    kind: Literal["error"] = field(default="error", init=False)


NotificationIntent = (
    SpamIntent | UnreadSingleIntent | UnreadManyIntent | ClearedIntent | ErrorIntent
)


__all__ = [
    "ClearedIntent",
    "ErrorIntent",
    "NotificationIntent",
    "PrivacyLevel",
    "SoundKind",
    "SpamIntent",
    "UnreadManyIntent",
    "UnreadSingleIntent",
]
