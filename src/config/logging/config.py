"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do daemon (notifier/bootstrap/)
    configure_logging(level="INFO", service_name="inbox_notifier")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("sync_pass_completed", extra={"latency_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import PassIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "inbox_notifier"

# Loggers de bibliotecas que poluem o output em DEBUG
_NOISY_LOGGERS = ("googleapiclient.discovery_cache", "httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    pass_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o daemon.

    Deve ser chamada uma vez na inicialização.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        pass_id_getter: Função opcional que retorna o pass_id
            da sincronização corrente (ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(PassIdFilter(service_name, pass_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e pass_id.
    """
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log observável de caminho best-effort que falhou sem afetar a passada.

    Usado quando uma consulta secundária (estatísticas, ping de update)
    falha e o fluxo segue com valor padrão.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "statistics").
        reason: Razão do fallback (ex: "http_503").
        elapsed_ms: Tempo decorrido em ms (quando aplicável).
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
