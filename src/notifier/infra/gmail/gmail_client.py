"""Client concreto da Gmail API para o motor de sincronizacao."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httplib2
from google.auth.exceptions import RefreshError, TransportError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from notifier.infra.gmail.gmail_parsers import (
    extract_message_ids,
    http_status,
    map_label_counts,
    map_message_payload,
)
from notifier.observability import get_pass_id
from notifier.protocols.mail_client import MailClientProtocol
from utils.errors import (
    AuthRefreshError,
    ConnectivityError,
    MarkAsReadError,
    RemoteApiError,
    StatisticsFetchError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from google.auth.credentials import Credentials

    from notifier.domain.mailbox import LabelCounts, MessagePayload

logger = logging.getLogger(__name__)

_COMPONENT = "gmail_client"

# Limite de ids por chamada de users.messages.batchModify
BATCH_MODIFY_LIMIT = 1000
_LIST_PAGE_SIZE = 500


class GmailClient(MailClientProtocol):
    """Implementacao do protocolo de email usando a Gmail API v1.

    As chamadas da googleapiclient sao bloqueantes e rodam em
    asyncio.to_thread.
    """

    __slots__ = ("_service", "_user_id")

    def __init__(
        self,
        *,
        credentials: Credentials | None = None,
        user_id: str = "me",
        service: Any | None = None,
    ) -> None:
        if service is None:
            if credentials is None:
                raise ValueError("credentials ou service deve ser informado")
            service = build("gmail", "v1", credentials=credentials, cache_discovery=False)
        self._service = service
        self._user_id = user_id

    async def get_label(self, name: str) -> LabelCounts:
        response = await self._call("get_label", self._get_label_sync, name)
        return map_label_counts(response)

    async def list_unread_message_ids(self, limit: int | None = None) -> list[str]:
        return await self._call("list_unread", self._list_unread_sync, limit)

    async def get_message(self, message_id: str) -> MessagePayload:
        response = await self._call("get_message", self._get_message_sync, message_id)
        return map_message_payload(response)

    async def batch_remove_label(self, message_ids: list[str], label: str) -> bool:
        if not message_ids:
            return True
        await self._call(
            "batch_remove_label",
            self._batch_remove_label_sync,
            list(message_ids),
            label,
            error_cls=MarkAsReadError,
        )
        logger.info(
            "gmail_label_removed",
            extra={
                "component": _COMPONENT,
                "action": "batch_remove_label",
                "result": "ok",
                "message_count": len(message_ids),
                "pass_id": get_pass_id(),
            },
        )
        return True

    async def get_draft_count(self) -> int:
        response = await self._call(
            "get_draft_count", self._list_drafts_sync, error_cls=StatisticsFetchError
        )
        return len(response.get("drafts") or [])

    async def get_label_count(self) -> int:
        response = await self._call(
            "get_label_count", self._list_labels_sync, error_cls=StatisticsFetchError
        )
        return len(response.get("labels") or [])

    async def get_profile_email(self) -> str:
        response = await self._call("get_profile", self._get_profile_sync)
        return str(response.get("emailAddress") or "")

    async def _call(
        self,
        action: str,
        func: Callable[..., Any],
        *args: Any,
        error_cls: type[RemoteApiError] = RemoteApiError,
    ) -> Any:
        """Executa a chamada bloqueante e traduz erros para o dominio."""
        try:
            return await asyncio.to_thread(func, *args)
        except HttpError as exc:
            status_code = http_status(exc)
            self._log_error(action=action, exc=exc, status_code=status_code)
            raise error_cls(
                f"Gmail API {action} failed ({status_code})", status_code=status_code
            ) from exc
        except RefreshError as exc:
            self._log_error(action=action, exc=exc)
            raise AuthRefreshError(f"Token refresh failed: {exc}") from exc
        except (httplib2.HttpLib2Error, TransportError, OSError) as exc:
            self._log_error(action=action, exc=exc, result="offline")
            raise ConnectivityError(f"Gmail API unreachable: {type(exc).__name__}") from exc

    def _get_label_sync(self, name: str) -> dict[str, Any]:
        return self._service.users().labels().get(userId=self._user_id, id=name).execute()

    def _list_unread_sync(self, limit: int | None) -> list[str]:
        messages = self._service.users().messages()
        ids: list[str] = []
        page_token: str | None = None
        while True:
            page_size = _LIST_PAGE_SIZE if limit is None else min(limit - len(ids), _LIST_PAGE_SIZE)
            kwargs: dict[str, Any] = {
                "userId": self._user_id,
                "labelIds": ["UNREAD"],
                "maxResults": page_size,
            }
            if page_token:
                kwargs["pageToken"] = page_token
            response = messages.list(**kwargs).execute()
            ids.extend(extract_message_ids(response))
            page_token = response.get("nextPageToken")
            if not page_token or (limit is not None and len(ids) >= limit):
                break
        return ids if limit is None else ids[:limit]

    def _get_message_sync(self, message_id: str) -> dict[str, Any]:
        return (
            self._service.users()
            .messages()
            .get(userId=self._user_id, id=message_id, format="full")
            .execute()
        )

    def _batch_remove_label_sync(self, message_ids: list[str], label: str) -> None:
        messages = self._service.users().messages()
        for start in range(0, len(message_ids), BATCH_MODIFY_LIMIT):
            chunk = message_ids[start : start + BATCH_MODIFY_LIMIT]
            messages.batchModify(
                userId=self._user_id,
                body={"ids": chunk, "removeLabelIds": [label]},
            ).execute()

    def _list_drafts_sync(self) -> dict[str, Any]:
        return self._service.users().drafts().list(userId=self._user_id).execute()

    def _list_labels_sync(self) -> dict[str, Any]:
        return self._service.users().labels().list(userId=self._user_id).execute()

    def _get_profile_sync(self) -> dict[str, Any]:
        return self._service.users().getProfile(userId=self._user_id).execute()

    def _log_error(
        self,
        *,
        action: str,
        exc: Exception,
        status_code: int | None = None,
        result: str = "error",
    ) -> None:
        extra: dict[str, object] = {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "error_type": type(exc).__name__,
            "pass_id": get_pass_id(),
        }
        if status_code is not None:
            extra["status_code"] = status_code
        logger.warning("gmail_api_error", extra=extra)


__all__ = ["BATCH_MODIFY_LIMIT", "GmailClient"]
