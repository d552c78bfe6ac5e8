"""Settings do ciclo de sincronização.

Intervalo de polling, política de reconexão e preferências de
notificação lidas pelo SyncEngine e pelo supervisor de reconexão.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

PrivacyLevelName = Literal["full", "hidden_names", "none"]

_PRIVACY_LEVELS = ("full", "hidden_names", "none")


@dataclass(frozen=True)
class SyncSettings:
    """Configurações de sincronização e notificação.

    Attributes:
        poll_interval_seconds: Intervalo do timer de polling
        reconnect_interval_seconds: Intervalo entre tentativas de reconexão
        max_reconnect_attempts: Tentativas antes de desistir até o próximo poll
        unstack_boundary: Acima deste total de não lidas o ícone vira "pilha"
        spam_notification: Notificar spams não lidos
        message_notification: Notificar mensagens não lidas
        audio_notification: Pedir som junto com a notificação
        privacy_level: Nível de detalhe exibido (full|hidden_names|none)
    """

    poll_interval_seconds: int = 60
    reconnect_interval_seconds: int = 15
    max_reconnect_attempts: int = 5
    unstack_boundary: int = 5
    spam_notification: bool = True
    message_notification: bool = True
    audio_notification: bool = True
    privacy_level: PrivacyLevelName = "full"

    def validate(self) -> list[str]:
        """Valida configurações de sincronização.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.poll_interval_seconds <= 0:
            errors.append("SYNC_POLL_INTERVAL_SECONDS deve ser > 0")

        if self.reconnect_interval_seconds <= 0:
            errors.append("SYNC_RECONNECT_INTERVAL_SECONDS deve ser > 0")

        # A primeira tentativa nunca re-checa a rede
        if self.max_reconnect_attempts < 2:
            errors.append("SYNC_MAX_RECONNECT_ATTEMPTS deve ser >= 2")

        if self.unstack_boundary < 1:
            errors.append("SYNC_UNSTACK_BOUNDARY deve ser >= 1")

        if self.privacy_level not in _PRIVACY_LEVELS:
            errors.append(f"SYNC_PRIVACY_LEVEL inválido: {self.privacy_level}")

        return errors


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_sync_from_env() -> SyncSettings:
    """Carrega SyncSettings de variáveis de ambiente."""
    privacy_str = os.getenv("SYNC_PRIVACY_LEVEL", "full").lower()
    privacy: PrivacyLevelName = (
        privacy_str if privacy_str in _PRIVACY_LEVELS else "full"
    )
    return SyncSettings(
        poll_interval_seconds=int(os.getenv("SYNC_POLL_INTERVAL_SECONDS", "60")),
        reconnect_interval_seconds=int(
            os.getenv("SYNC_RECONNECT_INTERVAL_SECONDS", "15")
        ),
        max_reconnect_attempts=int(os.getenv("SYNC_MAX_RECONNECT_ATTEMPTS", "5")),
        unstack_boundary=int(os.getenv("SYNC_UNSTACK_BOUNDARY", "5")),
        spam_notification=_parse_bool(os.getenv("SYNC_SPAM_NOTIFICATION", "true")),
        message_notification=_parse_bool(
            os.getenv("SYNC_MESSAGE_NOTIFICATION", "true")
        ),
        audio_notification=_parse_bool(os.getenv("SYNC_AUDIO_NOTIFICATION", "true")),
        privacy_level=privacy,
    )


@lru_cache(maxsize=1)
def get_sync_settings() -> SyncSettings:
    """Retorna instância cacheada de SyncSettings."""
    return _load_sync_from_env()
