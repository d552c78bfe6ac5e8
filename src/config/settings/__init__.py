"""Agregador de settings do inbox-notifier.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.gmail import (
    GMAIL_MODIFY_SCOPE,
    GmailSettings,
    get_gmail_settings,
)
from config.settings.sync import (
    PrivacyLevelName,
    SyncSettings,
    get_sync_settings,
)
from config.settings.update import (
    UpdatePeriodName,
    UpdateSettings,
    get_update_settings,
)

__all__ = [
    "GMAIL_MODIFY_SCOPE",
    "BaseSettings",
    "Environment",
    "GmailSettings",
    "PrivacyLevelName",
    "SyncSettings",
    "UpdatePeriodName",
    "UpdateSettings",
    "get_base_settings",
    "get_gmail_settings",
    "get_sync_settings",
    "get_update_settings",
]
