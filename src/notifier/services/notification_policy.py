"""Politica de notificacao.

Funcoes puras que transformam o resultado de uma passada na intencao
entregue ao presenter: texto, nivel de privacidade e som solicitado.
Tambem concentra os rotulos de contagem reutilizados pela apresentacao.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifier.domain.intents import (
    ClearedIntent,
    NotificationIntent,
    PrivacyLevel,
    SoundKind,
    SpamIntent,
    UnreadManyIntent,
    UnreadSingleIntent,
)
from notifier.domain.state import INBOX_CONTEXT_TAG

if TYPE_CHECKING:
    from notifier.domain.mailbox import MailboxSnapshot, MessageSummary

GENERIC_MESSAGE_LABEL = "New unread message"
GENERIC_SPAM_LABEL = "New unread spam"
SENDER_MAX_LENGTH = 48


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {plural if count > 1 else singular}"


def unread_label(count: int) -> str:
    return _plural(count, "unread message", "unread messages")


def spam_label(count: int) -> str:
    return _plural(count, "unread spam", "unread spams")


def attachment_label(count: int) -> str:
    return _plural(count, "attachment", "attachments")


def format_sender(message: MessageSummary) -> str:
    """Remetente com sufixo de anexos; o remetente e truncado antes do sufixo."""
    sender = message.sender_display
    if message.attachment_count > 0:
        return f"{sender[:SENDER_MAX_LENGTH]} – {attachment_label(message.attachment_count)}"
    return sender


def spam_intent(count: int, *, audio: bool = True) -> SpamIntent:
    return SpamIntent(count=count, sound=SoundKind.EXCLAMATION if audio else None)


def classify(
    snapshot: MailboxSnapshot,
    privacy: PrivacyLevel,
    *,
    audio: bool = True,
) -> NotificationIntent:
    """Decide a intencao de notificacao para o estado da caixa.

    Regras:
    - nenhuma nao lida: ClearedIntent
    - mais de uma nao lida: UnreadManyIntent, qualquer que seja a privacidade
    - privacidade NONE: UnreadManyIntent mesmo com uma unica mensagem
    - HIDDEN_NAMES: previa do corpo no lugar do assunto
    - FULL: assunto e remetente
    """
    count = snapshot.unread_threads
    if count == 0:
        return ClearedIntent()

    sound = SoundKind.ASTERISK if audio else None
    message = snapshot.sample_message
    if count > 1 or privacy is PrivacyLevel.NONE or message is None:
        return UnreadManyIntent(count=count, sound=sound)

    if privacy is PrivacyLevel.HIDDEN_NAMES:
        body = message.snippet or GENERIC_MESSAGE_LABEL
    else:
        body = message.subject or GENERIC_MESSAGE_LABEL

    return UnreadSingleIntent(
        message=message,
        privacy=privacy,
        title=format_sender(message),
        body=body,
        sound=sound,
    )


def inbox_context_tag(unread_threads: int, message_id: str | None) -> str:
    """Tag da notificacao de inbox; aponta para a mensagem quando ha so uma."""
    if unread_threads == 1 and message_id:
        return f"{INBOX_CONTEXT_TAG}/{message_id}"
    return INBOX_CONTEXT_TAG


def context_url(tag: str | None, base_url: str) -> str:
    """URL aberta quando o usuario interage com a notificacao."""
    return f"{base_url.rstrip('/')}/{tag or INBOX_CONTEXT_TAG}"


__all__ = [
    "GENERIC_MESSAGE_LABEL",
    "GENERIC_SPAM_LABEL",
    "SENDER_MAX_LENGTH",
    "attachment_label",
    "classify",
    "context_url",
    "format_sender",
    "inbox_context_tag",
    "spam_intent",
    "spam_label",
    "unread_label",
]
