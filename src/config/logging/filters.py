"""Filters de logging para injeção de contexto.

Campos injetados:
- pass_id: identificador da passada de sincronização corrente
- service: nome do serviço (ex: inbox_notifier)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class PassIdFilter(logging.Filter):
    """Injeta pass_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        pass_id_getter: Função que retorna o pass_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        pass_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_pass_id = pass_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona pass_id e service ao record.

        Se pass_id já foi passado via `extra`, preserva o valor.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "pass_id", None)
        record.pass_id = existing if existing else self._get_pass_id()
        record.service = self._service_name
        return True
