"""Contrato da sonda de conectividade consultada antes de cada passada."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConnectivityGateProtocol(Protocol):
    """Decide se operacoes de rede devem prosseguir."""

    async def is_available(self) -> bool:
        """Retorna True se ha conectividade com a internet."""
        ...
