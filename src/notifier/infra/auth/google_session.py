"""Sessao OAuth do usuario Gmail (authorized user token em disco)."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials

from notifier.protocols.auth_session import AuthSessionProtocol
from utils.errors import AuthRefreshError, ConnectivityError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_COMPONENT = "google_auth_session"


class GoogleAuthSession(AuthSessionProtocol):
    """Mantem as credenciais e renova o access token quando expira.

    O token renovado e persistido no mesmo arquivo para o proximo start.
    """

    __slots__ = ("_credentials", "_token_file")

    def __init__(self, credentials: Credentials, *, token_file: str | None = None) -> None:
        self._credentials = credentials
        self._token_file = token_file

    @classmethod
    def from_token_file(cls, token_file: str, scopes: Sequence[str]) -> GoogleAuthSession:
        credentials = Credentials.from_authorized_user_file(token_file, scopes=list(scopes))
        return cls(credentials, token_file=token_file)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def is_expired(self) -> bool:
        return bool(self._credentials.expired) or not self._credentials.valid

    async def refresh(self) -> bool:
        if not self._credentials.refresh_token:
            raise AuthRefreshError("Authorization needed: missing refresh token")
        try:
            await asyncio.to_thread(self._credentials.refresh, Request())
        except RefreshError as exc:
            logger.warning(
                "auth_refresh_failed",
                extra={"component": _COMPONENT, "action": "refresh", "result": "refused"},
            )
            raise AuthRefreshError(f"Authentication failed: {exc}") from exc
        except TransportError as exc:
            raise ConnectivityError("Token endpoint unreachable") from exc

        self._persist()
        logger.info(
            "auth_token_refreshed",
            extra={"component": _COMPONENT, "action": "refresh", "result": "ok"},
        )
        return True

    def _persist(self) -> None:
        if not self._token_file:
            return
        try:
            Path(self._token_file).write_text(self._credentials.to_json(), encoding="utf-8")
        except OSError as exc:
            logger.warning(
                "auth_token_persist_failed",
                extra={"component": _COMPONENT, "error_type": type(exc).__name__},
            )


__all__ = ["GoogleAuthSession"]
