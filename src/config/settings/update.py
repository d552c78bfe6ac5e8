"""Settings do verificador de atualização.

O SyncEngine só consulta a flag "atualizando" e dispara o ping;
a mecânica de download/instalação fica fora do core.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

UpdatePeriodName = Literal["startup", "day", "week", "month"]

_PERIODS = ("startup", "day", "week", "month")


@dataclass(frozen=True)
class UpdateSettings:
    """Configurações do ping de atualização.

    Attributes:
        enabled: Verificação automática habilitada
        period: Periodicidade da verificação disparada pelo ping
    """

    enabled: bool = True
    period: UpdatePeriodName = "week"

    def validate(self) -> list[str]:
        """Valida configurações de atualização."""
        errors: list[str] = []
        if self.period not in _PERIODS:
            errors.append(f"UPDATE_PERIOD inválido: {self.period}")
        return errors


def _load_update_from_env() -> UpdateSettings:
    """Carrega UpdateSettings de variáveis de ambiente."""
    period_str = os.getenv("UPDATE_PERIOD", "week").lower()
    period: UpdatePeriodName = period_str if period_str in _PERIODS else "week"
    return UpdateSettings(
        enabled=os.getenv("UPDATE_ENABLED", "true").lower() in ("true", "1", "yes"),
        period=period,
    )


@lru_cache(maxsize=1)
def get_update_settings() -> UpdateSettings:
    """Retorna instância cacheada de UpdateSettings."""
    return _load_update_from_env()
