"""Interpretacao de headers de mensagem para o resumo exibido na notificacao."""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING

from notifier.domain.mailbox import MessageSummary

if TYPE_CHECKING:
    from notifier.domain.mailbox import MessagePayload

MULTIPART_MIXED = "multipart/mixed"

# "Display Name <address>": tudo antes do endereco entre <>
_DISPLAY_NAME_RE = re.compile(r"^(?P<name>.*?)\s*<[^<>]*>\s*$", re.DOTALL)
_ANGLE_ADDRESS_RE = re.compile(r"<(?P<address>[^<>\s]+)>")
_BARE_ADDRESS_RE = re.compile(r"^\s*(?P<address>[^<>\s@]+@[^<>\s@]+)\s*$")
_QUOTES = "\"'"


def parse_sender(raw: str) -> str:
    """Extrai o remetente exibivel de um header From.

    Prioridade:
    1. Nome de exibicao de "Nome <endereco>", sem aspas ao redor
    2. Endereco isolado (entre <> ou nu), em minusculas
    3. Valor cru do header
    """
    value = raw.strip()

    match = _DISPLAY_NAME_RE.match(value)
    if match:
        name = match.group("name").strip().strip(_QUOTES).strip()
        if name:
            return name

    match = _ANGLE_ADDRESS_RE.search(value) or _BARE_ADDRESS_RE.match(value)
    if match:
        return match.group("address").lower()

    return raw


def header_value(payload: MessagePayload, name: str) -> str:
    """Busca header ignorando caixa; string vazia quando ausente."""
    wanted = name.lower()
    for key, value in payload.headers.items():
        if key.lower() == wanted:
            return value
    return ""


def count_attachments(payload: MessagePayload) -> int:
    """Conta partes nomeadas de mensagens multipart/mixed."""
    if payload.mime_type.lower() != MULTIPART_MIXED:
        return 0
    return sum(1 for filename in payload.part_filenames if filename)


def build_message_summary(payload: MessagePayload) -> MessageSummary:
    """Monta o resumo imutavel a partir da mensagem crua."""
    return MessageSummary(
        id=payload.id,
        subject=header_value(payload, "Subject").strip(),
        sender_display=parse_sender(header_value(payload, "From")),
        snippet=html.unescape(payload.snippet).strip(),
        attachment_count=count_attachments(payload),
    )


__all__ = [
    "MULTIPART_MIXED",
    "build_message_summary",
    "count_attachments",
    "header_value",
    "parse_sender",
]
