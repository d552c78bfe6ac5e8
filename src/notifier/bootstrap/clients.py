"""Factories de clientes externos — OAuth, Gmail API e sonda de rede."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notifier.infra.auth import GoogleAuthSession
from notifier.infra.connectivity import HttpConnectivityProbe
from notifier.infra.gmail import GmailClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings import GmailSettings
    from notifier.protocols.mail_client import MailClientProtocol

logger = logging.getLogger(__name__)


def create_auth_session(settings: GmailSettings) -> GoogleAuthSession:
    """Carrega o token autorizado do disco.

    Raises:
        ValueError: Se GMAIL_TOKEN_FILE nao configurado
    """
    if not settings.token_file:
        msg = "GMAIL_TOKEN_FILE não configurado"
        raise ValueError(msg)

    session = GoogleAuthSession.from_token_file(settings.token_file, settings.scopes)
    logger.info(
        "auth_session_loaded",
        extra={"component": "bootstrap", "expired": session.is_expired()},
    )
    return session


def create_mail_client_factory(
    session: GoogleAuthSession,
    settings: GmailSettings,
) -> Callable[[], MailClientProtocol]:
    """Factory chamada pelo SyncEngine no primeiro uso do client."""

    def factory() -> MailClientProtocol:
        client = GmailClient(credentials=session.credentials, user_id=settings.user_id)
        logger.info("gmail_client_created", extra={"component": "bootstrap"})
        return client

    return factory


def create_connectivity_probe(settings: GmailSettings) -> HttpConnectivityProbe:
    return HttpConnectivityProbe(
        settings.connectivity_probe_url,
        timeout_seconds=settings.connectivity_timeout_seconds,
    )
