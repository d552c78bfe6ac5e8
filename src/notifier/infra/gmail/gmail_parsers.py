"""Helpers internos de parsing para respostas da Gmail API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from notifier.domain.mailbox import LabelCounts, MessagePayload

if TYPE_CHECKING:
    from googleapiclient.errors import HttpError


def map_label_counts(payload: dict[str, Any]) -> LabelCounts:
    return LabelCounts(
        unread_threads=_as_int(payload.get("threadsUnread")),
        total_threads=_as_int(payload.get("threadsTotal")),
    )


def map_message_payload(payload: dict[str, Any]) -> MessagePayload:
    """Achata users.messages.get (format=full) no contrato do core."""
    root = payload.get("payload") if isinstance(payload.get("payload"), dict) else {}
    headers: dict[str, str] = {}
    for header in root.get("headers") or []:
        if isinstance(header, dict) and isinstance(header.get("name"), str):
            # Mantemos o primeiro valor quando o header se repete
            headers.setdefault(header["name"], str(header.get("value") or ""))

    parts = root.get("parts") or []
    return MessagePayload(
        id=str(payload.get("id") or ""),
        headers=headers,
        snippet=str(payload.get("snippet") or ""),
        mime_type=str(root.get("mimeType") or ""),
        part_filenames=[
            str(part.get("filename") or "") for part in parts if isinstance(part, dict)
        ],
    )


def extract_message_ids(response: dict[str, Any]) -> list[str]:
    messages = response.get("messages") if isinstance(response, dict) else None
    if not isinstance(messages, list):
        return []
    return [str(item["id"]) for item in messages if isinstance(item, dict) and item.get("id")]


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def _as_int(value: Any) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0
