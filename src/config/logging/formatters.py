"""Formatters de logging estruturado.

Define o formatter JSON com campos obrigatórios:
- pass_id
- service
- timestamp (asctime)
- level
- logger (name)
- message

Sem assuntos, remetentes ou snippets de email nos logs.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado (ordem estável no output)
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "pass_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,120",
            "level": "INFO",
            "logger": "notifier.services.sync_engine",
            "message": "sync_pass_completed",
            "pass_id": "9f1c...",
            "service": "inbox_notifier"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
