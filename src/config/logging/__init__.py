"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="inbox_notifier")

    logger = get_logger(__name__)
    logger.info("sync_pass_completed", extra={"latency_ms": 42})

Campos obrigatórios em todo log:
- pass_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import PassIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "PassIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
