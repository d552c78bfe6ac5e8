"""Registro de métricas via structured logging.

As métricas são logs estruturados agregáveis posteriormente.

Métricas suportadas:
- Passada de sincronização: resultado e latência
- Tentativa de reconexão: número da tentativa e desfecho
- Notificação: tipo de intenção entregue

Uso:
    start = time.perf_counter()
    # ... passada ...
    record_sync_pass("notified", (time.perf_counter() - start) * 1000, manual=False)
"""

from __future__ import annotations

import logging

from notifier.observability.correlation import get_pass_id

logger = logging.getLogger(__name__)


def record_sync_pass(
    result: str,
    latency_ms: float,
    *,
    manual: bool,
) -> None:
    """Registra o desfecho de uma passada.

    Args:
        result: Desfecho (ex: "notified", "unchanged", "spam", "error", "offline")
        latency_ms: Duração da passada em milissegundos
        manual: Se a passada foi disparada pelo usuário
    """
    logger.info(
        "metric_sync_pass",
        extra={
            "metric_type": "sync_pass",
            "component": "sync_engine",
            "result": result,
            "manual": manual,
            "latency_ms": round(latency_ms, 2),
            "pass_id": get_pass_id(),
        },
    )


def record_reconnect_attempt(attempt: int, outcome: str) -> None:
    """Registra uma tentativa do supervisor de reconexão.

    Args:
        attempt: Número da tentativa (1 = entrada no ciclo)
        outcome: Desfecho (ex: "armed", "waiting", "recovered", "exhausted")
    """
    logger.info(
        "metric_reconnect_attempt",
        extra={
            "metric_type": "reconnect_attempt",
            "component": "reconnection_supervisor",
            "attempt": attempt,
            "outcome": outcome,
        },
    )


def record_notification(kind: str) -> None:
    """Registra a intenção de notificação entregue ao presenter (sem conteúdo)."""
    logger.info(
        "metric_notification",
        extra={
            "metric_type": "notification",
            "component": "notification_policy",
            "intent": kind,
            "pass_id": get_pass_id(),
        },
    )
