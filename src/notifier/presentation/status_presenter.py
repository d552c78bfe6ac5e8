"""Adaptador de apresentacao: intencoes e status do core → superficie de status.

Concentra os textos, icones e sons; o core nunca toca a superficie
diretamente. O texto do icone tem duas linhas: o status corrente e o
horario da ultima sincronizacao.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notifier.domain.intents import (
    ClearedIntent,
    ErrorIntent,
    SpamIntent,
    UnreadManyIntent,
    UnreadSingleIntent,
)
from notifier.domain.state import Affordance, StatusKind
from notifier.protocols.presenter import PresenterProtocol
from notifier.protocols.status_surface import IconKind, TipSeverity
from notifier.services.notification_policy import (
    GENERIC_MESSAGE_LABEL,
    GENERIC_SPAM_LABEL,
    spam_label,
    unread_label,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from notifier.domain.intents import NotificationIntent
    from notifier.domain.mailbox import MailboxStatistics
    from notifier.protocols.status_surface import StatusSurfaceProtocol

logger = logging.getLogger(__name__)

TEXT_SYNCING = "Syncing..."
TEXT_NO_MESSAGE = "No message"
TEXT_SYNC_ERROR = "Sync error"
TEXT_RECONNECTING = "Trying to reconnect..."
TEXT_RECONNECT_FAILED = "Unable to reconnect"
TEXT_MARK_AS_READ_ERROR = "Unable to mark messages as read"
TEXT_PAUSED = "Notifications paused"
TEXT_MARK_AS_READ = "Mark as read"
TIP_ERROR_TITLE = "Error"
TIP_SYNC_ERROR_PREFIX = "A sync error occurred: "
TIP_MARK_AS_READ_ERROR_PREFIX = "An error occurred while marking messages as read: "


def sync_time_line(at: datetime) -> str:
    return f"Last sync: {at.strftime('%H:%M:%S')}"


class StatusPresenter(PresenterProtocol):
    """Renderiza intencoes numa StatusSurface (tray, log, testes)."""

    __slots__ = ("_account", "_statistics", "_surface", "_text", "_unstack_boundary")

    def __init__(self, surface: StatusSurfaceProtocol, *, unstack_boundary: int = 5) -> None:
        self._surface = surface
        self._unstack_boundary = unstack_boundary
        self._text = ""
        self._statistics: MailboxStatistics | None = None
        self._account: str | None = None

    @property
    def text(self) -> str:
        return self._text

    @property
    def statistics(self) -> MailboxStatistics | None:
        return self._statistics

    @property
    def account(self) -> str | None:
        return self._account

    def emit(self, intent: NotificationIntent) -> None:
        if isinstance(intent, SpamIntent):
            label = spam_label(intent.count)
            self._surface.show_tip(label, GENERIC_SPAM_LABEL, TipSeverity.ERROR)
            self._surface.set_icon(IconKind.SPAM)
            self._set_text(label)
        elif isinstance(intent, UnreadSingleIntent):
            self._surface.show_tip(intent.title, intent.body, TipSeverity.INFO)
        elif isinstance(intent, UnreadManyIntent):
            self._surface.show_tip(
                unread_label(intent.count), GENERIC_MESSAGE_LABEL, TipSeverity.INFO
            )
        elif isinstance(intent, ClearedIntent):
            self._surface.set_icon(IconKind.NORMAL)
            self._set_text(TEXT_NO_MESSAGE)
            self._surface.set_menu_label(Affordance.MARK_AS_READ, TEXT_MARK_AS_READ)
            self._surface.set_menu_enabled(Affordance.MARK_AS_READ, False)
        elif isinstance(intent, ErrorIntent):
            self._surface.set_icon(IconKind.WARNING)
            self._set_text(TEXT_SYNC_ERROR)
            self._surface.show_tip(
                TIP_ERROR_TITLE, TIP_SYNC_ERROR_PREFIX + intent.message, TipSeverity.WARNING
            )

        if intent.sound is not None:
            self._surface.play_sound(intent.sound)

    def set_status(
        self,
        kind: StatusKind,
        count: int | None = None,
        detail: str | None = None,
    ) -> None:
        if kind is StatusKind.SYNCING:
            self._surface.set_icon(IconKind.SYNC)
            self._set_text(TEXT_SYNCING)
        elif kind is StatusKind.HAS_MAIL:
            unread = count or 0
            icon = IconKind.MAILS if unread <= self._unstack_boundary else IconKind.STACK
            self._surface.set_icon(icon)
            self._set_text(unread_label(unread))
            self._enable_mark_as_read(unread)
        elif kind is StatusKind.RECONNECTING:
            self._surface.set_icon(IconKind.RETRY)
            self._set_text(TEXT_RECONNECTING)
        elif kind is StatusKind.RECONNECT_FAILED:
            self._surface.set_icon(IconKind.WARNING)
            self._set_text(TEXT_RECONNECT_FAILED)
        elif kind is StatusKind.MARK_AS_READ_ERROR:
            # Restaura o item com a contagem anterior para nova tentativa
            self._enable_mark_as_read(count or 0)
            self._surface.set_icon(IconKind.WARNING)
            self._set_text(TEXT_MARK_AS_READ_ERROR)
            self._surface.show_tip(
                TIP_ERROR_TITLE,
                TIP_MARK_AS_READ_ERROR_PREFIX + (detail or ""),
                TipSeverity.WARNING,
            )
        elif kind is StatusKind.PAUSED:
            self._surface.set_icon(IconKind.PAUSED)
            self._set_text(TEXT_PAUSED)

    def set_affordances(self, items: Iterable[Affordance], enabled: bool) -> None:
        for item in items:
            self._surface.set_menu_enabled(item, enabled)

    def stamp_sync_time(self, at: datetime) -> None:
        """Mantem a primeira linha do texto e troca o horario da sincronizacao."""
        first_line = self._text.split("\n", 1)[0]
        self._set_text(f"{first_line}\n{sync_time_line(at)}")

    def show_statistics(self, stats: MailboxStatistics) -> None:
        self._statistics = stats
        logger.debug(
            "statistics_updated",
            extra={
                "component": "status_presenter",
                "unread_threads": stats.unread_threads,
                "total_threads": stats.total_threads,
                "drafts": stats.drafts,
                "labels": stats.labels,
            },
        )

    def show_account(self, email_address: str) -> None:
        self._account = email_address

    def _enable_mark_as_read(self, count: int) -> None:
        label = f"{TEXT_MARK_AS_READ} ({count})" if count > 0 else TEXT_MARK_AS_READ
        self._surface.set_menu_label(Affordance.MARK_AS_READ, label)
        self._surface.set_menu_enabled(Affordance.MARK_AS_READ, count > 0)

    def _set_text(self, text: str) -> None:
        self._text = text
        self._surface.set_text(text)


__all__ = ["StatusPresenter", "sync_time_line"]
