"""Contrato da sessao de autenticacao (renovacao de token)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AuthSessionProtocol(Protocol):
    def is_expired(self) -> bool:
        """Retorna True se o token de acesso expirou."""
        ...

    async def refresh(self) -> bool:
        """Renova o token; retorna True quando o token esta valido ao final."""
        ...
