"""Client da Gmail API."""

from notifier.infra.gmail.gmail_client import BATCH_MODIFY_LIMIT, GmailClient

__all__ = ["BATCH_MODIFY_LIMIT", "GmailClient"]
