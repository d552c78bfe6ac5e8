"""Contrato do client de email autenticado consumido pelo core.

Mantemos apenas o protocolo aqui para permitir trocar o provider
sem impactar o motor de sincronizacao.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from notifier.domain.mailbox import LabelCounts, MessagePayload


@runtime_checkable
class MailClientProtocol(Protocol):
    """Operacoes remotas de leitura/mutacao da caixa.

    Falhas de rede devem levantar ConnectivityError; falhas do servico,
    RemoteApiError.
    """

    async def get_label(self, name: str) -> LabelCounts:
        """Retorna contadores de threads do label (ex: INBOX, SPAM)."""
        ...

    async def list_unread_message_ids(self, limit: int | None = None) -> list[str]:
        """Lista ids de mensagens nao lidas (todas quando limit e None)."""
        ...

    async def get_message(self, message_id: str) -> MessagePayload:
        """Busca headers, snippet e partes de uma mensagem."""
        ...

    async def batch_remove_label(self, message_ids: list[str], label: str) -> bool:
        """Remove o label das mensagens em lote."""
        ...

    async def get_draft_count(self) -> int:
        """Total de rascunhos."""
        ...

    async def get_label_count(self) -> int:
        """Total de labels da conta."""
        ...

    async def get_profile_email(self) -> str:
        """Endereco de email da conta autenticada."""
        ...
