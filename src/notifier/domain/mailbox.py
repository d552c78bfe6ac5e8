"""Modelos de dominio da caixa de entrada.

Contratos trocados entre o client de email e o motor de sincronizacao,
sem acoplar regras de notificacao ao formato da Gmail API.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class LabelCounts(BaseModel):
    """Contadores de threads de um label (INBOX, SPAM)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    unread_threads: int = Field(default=0, ge=0, description="Threads nao lidas.")
    total_threads: int = Field(default=0, ge=0, description="Total de threads.")


class MessagePayload(BaseModel):
    """Mensagem crua retornada pelo client: headers, snippet e partes MIME."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Identificador da mensagem no servico.")
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers de topo indexados pelo nome (Subject, From...).",
    )
    snippet: str = Field(default="", description="Previa HTML-escaped do corpo.")
    mime_type: str = Field(default="", description="MIME type do payload raiz.")
    part_filenames: list[str] = Field(
        default_factory=list,
        description="Nome de arquivo de cada parte de primeiro nivel ('' se inline).",
    )


class MessageSummary(BaseModel):
    """Resumo imutavel de uma mensagem, derivado dos headers."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Identificador da mensagem.")
    subject: str = Field(default="", description="Assunto cru (pode ser vazio).")
    sender_display: str = Field(default="", description="Remetente ja interpretado.")
    snippet: str = Field(default="", description="Previa ja decodificada.")
    attachment_count: int = Field(default=0, ge=0, description="Partes nomeadas.")


class MailboxSnapshot(BaseModel):
    """Fotografia efemera da caixa produzida a cada passada."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    unread_threads: int = Field(default=0, ge=0)
    total_threads: int = Field(default=0, ge=0)
    spam_unread: int = Field(default=0, ge=0)
    sample_message: MessageSummary | None = None


@dataclass(frozen=True, slots=True)
class MailboxStatistics:
    """Estatisticas exibidas no painel da conta.

    drafts/labels ficam None quando a consulta best-effort falhou.
    """

    unread_threads: int
    total_threads: int
    drafts: int | None = None
    labels: int | None = None


__all__ = [
    "LabelCounts",
    "MailboxSnapshot",
    "MailboxStatistics",
    "MessagePayload",
    "MessageSummary",
]
