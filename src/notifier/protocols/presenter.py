"""Contrato do sink de intencoes usado pelo SyncEngine e pelo supervisor.

O core emite intencoes e sinais tipados; o adaptador de apresentacao
decide como renderiza-los na superficie de status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from notifier.domain.intents import NotificationIntent
    from notifier.domain.mailbox import MailboxStatistics
    from notifier.domain.state import Affordance, StatusKind


@runtime_checkable
class PresenterProtocol(Protocol):
    def emit(self, intent: NotificationIntent) -> None:
        """Entrega a intencao produzida pela passada."""
        ...

    def set_status(
        self,
        kind: StatusKind,
        count: int | None = None,
        detail: str | None = None,
    ) -> None:
        """Sinaliza status persistente (sincronizando, com email, reconectando...)."""
        ...

    def set_affordances(self, items: Iterable[Affordance], enabled: bool) -> None:
        """Habilita/desabilita comandos do usuario."""
        ...

    def stamp_sync_time(self, at: datetime) -> None:
        """Anexa o horario da ultima sincronizacao ao status atual."""
        ...

    def show_statistics(self, stats: MailboxStatistics) -> None: ...

    def show_account(self, email_address: str) -> None: ...
