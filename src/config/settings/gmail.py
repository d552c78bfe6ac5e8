"""Settings de integracao com a Gmail API.

Centraliza a leitura de env do client de email e da sonda de
conectividade usada antes de cada sincronizacao.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

GMAIL_MODIFY_SCOPE = "https://www.googleapis.com/auth/gmail.modify"


class GmailSettings(BaseModel):
    """Configuracoes do client Gmail e da sonda de rede."""

    model_config = ConfigDict(extra="ignore")

    token_file: str = Field(
        default="",
        description="Caminho do token OAuth (authorized user JSON) ja autorizado.",
    )
    scopes: list[str] = Field(
        default_factory=lambda: [GMAIL_MODIFY_SCOPE],
        description="Escopos OAuth exigidos pelo client.",
    )
    user_id: str = Field(
        default="me",
        description="Usuario alvo das chamadas (me = dono do token).",
    )
    web_base_url: str = Field(
        default="https://mail.google.com/mail/u/0/",
        description="Base da interface web usada para abrir o contexto da notificacao.",
    )
    connectivity_probe_url: str = Field(
        default="https://clients3.google.com/generate_204",
        description="URL leve consultada para detectar conectividade.",
    )
    connectivity_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout da sonda de conectividade.",
    )

    def validate_settings(self) -> list[str]:
        """Valida configuracoes minimas para falar com a Gmail API."""
        errors: list[str] = []
        if not self.token_file:
            errors.append("GMAIL_TOKEN_FILE nao configurado")
        if not self.scopes:
            errors.append("GMAIL_SCOPES nao pode ser vazio")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_gmail_from_env() -> GmailSettings:
    """Carrega GmailSettings a partir de variaveis de ambiente."""
    scopes_raw = _read_optional_env("GMAIL_SCOPES")
    overrides: dict[str, object] = {}
    if scopes_raw:
        overrides["scopes"] = [s.strip() for s in scopes_raw.split(",") if s.strip()]
    return GmailSettings(
        token_file=os.getenv("GMAIL_TOKEN_FILE", ""),
        user_id=os.getenv("GMAIL_USER_ID", "me"),
        web_base_url=os.getenv("GMAIL_WEB_BASE_URL", "https://mail.google.com/mail/u/0/"),
        connectivity_probe_url=os.getenv(
            "CONNECTIVITY_PROBE_URL", "https://clients3.google.com/generate_204"
        ),
        connectivity_timeout_seconds=float(
            os.getenv("CONNECTIVITY_TIMEOUT_SECONDS", "5")
        ),
        **overrides,
    )


@lru_cache(maxsize=1)
def get_gmail_settings() -> GmailSettings:
    """Retorna instancia cacheada de GmailSettings."""
    return _load_gmail_from_env()


__all__ = ["GMAIL_MODIFY_SCOPE", "GmailSettings", "get_gmail_settings"]
