"""Contrato do verificador de atualizacao que bloqueia a sincronizacao."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UpdateGateProtocol(Protocol):
    def is_updating(self) -> bool:
        """Retorna True enquanto uma atualizacao estiver em andamento."""
        ...

    def ping(self) -> None:
        """Dispara verificacao periodica quando o periodo expirou (best-effort)."""
        ...
