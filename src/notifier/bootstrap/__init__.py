"""Bootstrap do daemon — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos do core.

Uso:
    from notifier.bootstrap import build_runtime, initialize_app

    initialize_app()
    validate_runtime_settings()
    runtime = build_runtime()
"""

from __future__ import annotations

import logging
import os

from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_gmail_settings,
    get_sync_settings,
    get_update_settings,
)
from notifier.observability import get_pass_id

# Nome do serviço para logs e métricas
SERVICE_NAME = "inbox_notifier"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa o daemon com logging JSON estruturado e pass_id.

    Deve ser chamada uma vez no início do processo.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        pass_id_getter=get_pass_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        pass_id_getter=get_pass_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"sync: {error}" for error in get_sync_settings().validate())
    errors.extend(f"gmail: {error}" for error in get_gmail_settings().validate_settings())
    errors.extend(f"update: {error}" for error in get_update_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def build_runtime():
    """Monta o runtime com os clients reais a partir das settings de env.

    Returns:
        NotifierRuntime pronto para `run()`
    """
    from notifier.bootstrap.clients import (
        create_auth_session,
        create_connectivity_probe,
        create_mail_client_factory,
    )
    from notifier.runtime import NotifierRuntime

    gmail_settings = get_gmail_settings()
    session = create_auth_session(gmail_settings)
    return NotifierRuntime(
        sync_settings=get_sync_settings(),
        update_settings=get_update_settings(),
        web_base_url=gmail_settings.web_base_url,
        mail_client_factory=create_mail_client_factory(session, gmail_settings),
        connectivity=create_connectivity_probe(gmail_settings),
        auth=session,
    )


__all__ = [
    "SERVICE_NAME",
    "build_runtime",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
