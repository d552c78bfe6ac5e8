"""Motor de sincronizacao da caixa de entrada.

Executa uma passada por vez (single-flight): aplica os guards de
atualizacao, reconexao, pausa e conectividade, consulta o servico de
email, compara com a passada anterior e entrega no maximo uma intencao
de notificacao ao presenter.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime
from typing import TYPE_CHECKING

from config.logging import log_fallback
from notifier.domain.intents import ClearedIntent, ErrorIntent, PrivacyLevel
from notifier.domain.mailbox import MailboxSnapshot, MailboxStatistics
from notifier.domain.state import SPAM_CONTEXT_TAG, SYNC_AFFORDANCES, StatusKind, SyncState
from notifier.observability import (
    record_notification,
    record_sync_pass,
    reset_pass_id,
    set_pass_id,
)
from notifier.services.message_headers import build_message_summary
from notifier.services.notification_policy import classify, inbox_context_tag, spam_intent
from utils.errors import ConnectivityError, InfrastructureError, MarkAsReadError

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.sync import SyncSettings
    from notifier.domain.intents import NotificationIntent
    from notifier.domain.mailbox import LabelCounts, MessageSummary
    from notifier.protocols.auth_session import AuthSessionProtocol
    from notifier.protocols.connectivity import ConnectivityGateProtocol
    from notifier.protocols.mail_client import MailClientProtocol
    from notifier.protocols.presenter import PresenterProtocol
    from notifier.protocols.update_gate import UpdateGateProtocol
    from notifier.services.reconnection_supervisor import ReconnectionSupervisor
    from notifier.services.schedule_controller import ScheduleController

logger = logging.getLogger(__name__)

_COMPONENT = "sync_engine"

INBOX_LABEL = "INBOX"
SPAM_LABEL = "SPAM"
UNREAD_LABEL = "UNREAD"


def _now() -> datetime:
    return datetime.now().astimezone()


class SyncEngine:
    """Orquestra uma passada de sincronizacao.

    O estado entre passadas (SyncState) pertence ao engine; o supervisor
    de reconexao recebe a mesma instancia por referencia.
    """

    __slots__ = (
        "_auth",
        "_client",
        "_client_factory",
        "_clock",
        "_connectivity",
        "_lock",
        "_presenter",
        "_schedule",
        "_settings",
        "_state",
        "_supervisor",
        "_update_gate",
    )

    def __init__(
        self,
        *,
        mail_client_factory: Callable[[], MailClientProtocol],
        connectivity: ConnectivityGateProtocol,
        auth: AuthSessionProtocol,
        update_gate: UpdateGateProtocol,
        presenter: PresenterProtocol,
        schedule: ScheduleController,
        supervisor: ReconnectionSupervisor,
        settings: SyncSettings,
        state: SyncState | None = None,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        self._client_factory = mail_client_factory
        self._client: MailClientProtocol | None = None
        self._connectivity = connectivity
        self._auth = auth
        self._update_gate = update_gate
        self._presenter = presenter
        self._schedule = schedule
        self._supervisor = supervisor
        self._settings = settings
        self._state = state or SyncState()
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def settings(self) -> SyncSettings:
        return self._settings

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    def apply_settings(self, settings: SyncSettings) -> None:
        """Troca as preferencias; vale a partir da proxima passada."""
        self._settings = settings

    async def run(self, manual: bool = False, refresh_token_first: bool = False) -> None:
        """Executa uma passada (fire-and-forget; so efeitos colaterais).

        Pedidos concorrentes aguardam a passada em andamento terminar.

        Args:
            manual: Disparada pelo usuario (mostra "sincronizando", ignora
                o atalho de contagem inalterada)
            refresh_token_first: Renova o token antes de consultar o servico
        """
        async with self._lock:
            token = set_pass_id()
            try:
                await self._run_pass(manual, refresh_token_first)
            finally:
                reset_pass_id(token)

    async def mark_as_read(self) -> None:
        """Remove UNREAD de todas as mensagens nao lidas."""
        async with self._lock:
            token = set_pass_id()
            try:
                await self._mark_as_read()
            finally:
                reset_pass_id(token)

    async def _run_pass(self, manual: bool, refresh_token_first: bool) -> None:
        # Pedido durante atualizacao e descartado sem retorno ao usuario
        if self._update_gate.is_updating():
            logger.info("sync_skipped_updating", extra={"component": _COMPONENT})
            return

        state = self._state
        state.last_sync_time = self._clock()

        if state.reconnection_attempts != 0:
            # Evita o aviso de "reconexao continua" apos qualquer nova passada
            manual = True
            state.reconnection_attempts = 0
            if self._supervisor.cancel():
                self._schedule.resume_polling()

        if manual and self._schedule.is_paused:
            self._schedule.resume()
            return

        if not await self._connectivity.is_available():
            self._enter_reconnection()
            record_sync_pass("offline", 0.0, manual=manual)
            return

        started = time.perf_counter()
        result = "error"
        try:
            if refresh_token_first and self._auth.is_expired():
                await self._auth.refresh()

            self._presenter.set_affordances(SYNC_AFFORDANCES, True)
            if manual:
                self._presenter.set_status(StatusKind.SYNCING)
            self._ping_update_gate()

            result = await self._sync_mailbox(manual)
        except ConnectivityError:
            logger.warning("sync_connectivity_lost", extra={"component": _COMPONENT})
            result = "offline"
            self._enter_reconnection()
        except InfrastructureError as exc:
            logger.warning(
                "sync_remote_error",
                extra={
                    "component": _COMPONENT,
                    "error_type": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                },
            )
            self._emit(ErrorIntent(message=str(exc) or type(exc).__name__))
        except Exception as exc:
            logger.exception("sync_unexpected_error", extra={"component": _COMPONENT})
            self._emit(ErrorIntent(message=str(exc) or type(exc).__name__))
        finally:
            self._presenter.stamp_sync_time(state.last_sync_time)
            record_sync_pass(result, (time.perf_counter() - started) * 1000, manual=manual)

    async def _sync_mailbox(self, manual: bool) -> str:
        """Passos de consulta e decisao; retorna o desfecho para metricas."""
        state = self._state
        settings = self._settings
        client = await self._get_client()

        spam_unread = 0
        if settings.spam_notification:
            spam = await client.get_label(SPAM_LABEL)
            spam_unread = spam.unread_threads
            if spam_unread > 0:
                if not manual and state.last_context_tag == SPAM_CONTEXT_TAG:
                    return "spam_unchanged"
                self._emit(spam_intent(spam_unread, audio=settings.audio_notification))
                state.last_context_tag = SPAM_CONTEXT_TAG
                return "spam"

        inbox = await client.get_label(INBOX_LABEL)
        await self._update_statistics(client, inbox)

        unread = inbox.unread_threads
        if not manual and unread == state.unread_count:
            return "unchanged"

        if unread > 0:
            self._presenter.set_status(StatusKind.HAS_MAIL, count=unread)
            if settings.message_notification:
                sample = await self._fetch_sample(client)
                snapshot = MailboxSnapshot(
                    unread_threads=unread,
                    total_threads=inbox.total_threads,
                    spam_unread=spam_unread,
                    sample_message=sample,
                )
                self._emit(
                    classify(
                        snapshot,
                        PrivacyLevel(settings.privacy_level),
                        audio=settings.audio_notification,
                    )
                )
                state.last_context_tag = inbox_context_tag(
                    unread, sample.id if sample is not None else None
                )
        else:
            self._emit(ClearedIntent())

        state.unread_count = unread
        return "notified"

    async def _mark_as_read(self) -> None:
        state = self._state
        state.last_sync_time = self._clock()
        self._presenter.set_status(StatusKind.SYNCING)
        try:
            client = await self._get_client()
            message_ids = await client.list_unread_message_ids(limit=None)
            if message_ids:
                if not await client.batch_remove_label(message_ids, UNREAD_LABEL):
                    raise MarkAsReadError("batch modify rejected")
                inbox = await client.get_label(INBOX_LABEL)
                await self._update_statistics(client, inbox)

            self._emit(ClearedIntent())
            state.last_context_tag = None
            state.unread_count = 0
            logger.info(
                "mark_as_read_completed",
                extra={"component": _COMPONENT, "message_count": len(message_ids)},
            )
        except InfrastructureError as exc:
            # Sucesso parcial nao e reconciliado; a proxima passada corrige a contagem
            logger.warning(
                "mark_as_read_failed",
                extra={"component": _COMPONENT, "error_type": type(exc).__name__},
            )
            self._presenter.set_status(
                StatusKind.MARK_AS_READ_ERROR,
                count=state.unread_count,
                detail=str(exc) or type(exc).__name__,
            )
        except Exception as exc:
            logger.exception("mark_as_read_unexpected_error", extra={"component": _COMPONENT})
            self._presenter.set_status(
                StatusKind.MARK_AS_READ_ERROR,
                count=state.unread_count,
                detail=str(exc) or type(exc).__name__,
            )
        finally:
            self._presenter.stamp_sync_time(state.last_sync_time)

    async def _get_client(self) -> MailClientProtocol:
        """Cria o client uma unica vez e busca o endereco da conta."""
        if self._client is None:
            client = self._client_factory()
            email_address = await client.get_profile_email()
            self._client = client
            self._state.email_address = email_address
            self._presenter.show_account(email_address)
        return self._client

    async def _fetch_sample(self, client: MailClientProtocol) -> MessageSummary | None:
        message_ids = await client.list_unread_message_ids(limit=1)
        if not message_ids:
            return None
        payload = await client.get_message(message_ids[0])
        return build_message_summary(payload)

    async def _update_statistics(self, client: MailClientProtocol, inbox: LabelCounts) -> None:
        """Atualiza estatisticas; falhas de rascunhos/labels nao afetam a passada."""
        drafts: int | None = None
        labels: int | None = None
        try:
            drafts = await client.get_draft_count()
            labels = await client.get_label_count()
        except InfrastructureError as exc:
            log_fallback(logger, "statistics", reason=type(exc).__name__)

        self._presenter.show_statistics(
            MailboxStatistics(
                unread_threads=inbox.unread_threads,
                total_threads=inbox.total_threads,
                drafts=drafts,
                labels=labels,
            )
        )

    def _ping_update_gate(self) -> None:
        try:
            self._update_gate.ping()
        except Exception as exc:
            log_fallback(logger, "update_ping", reason=type(exc).__name__)

    def _enter_reconnection(self) -> None:
        self._schedule.stop()
        self._supervisor.start()

    def _emit(self, intent: NotificationIntent) -> None:
        record_notification(intent.kind)
        self._presenter.emit(intent)


__all__ = ["INBOX_LABEL", "SPAM_LABEL", "UNREAD_LABEL", "SyncEngine"]
