"""Gerenciamento do pass_id para rastrear uma passada de sincronização.

O pass_id é gerado no início de cada passada e injetado em todos os
logs emitidos durante ela. Usa ContextVar para ser async-safe.

Uso:
    token = set_pass_id()
    try:
        # executar a passada
    finally:
        reset_pass_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_pass_id: ContextVar[str] = ContextVar("pass_id", default="")


def get_pass_id() -> str:
    """Retorna o pass_id do contexto atual (string vazia fora de uma passada)."""
    return _pass_id.get()


def set_pass_id(pass_id: str | None = None) -> Token[str]:
    """Define o pass_id no contexto atual.

    Args:
        pass_id: ID a definir. Se None, gera um novo.

    Returns:
        Token para reset posterior via reset_pass_id().
    """
    return _pass_id.set(pass_id or generate_pass_id())


def reset_pass_id(token: Token[str]) -> None:
    """Restaura o pass_id ao valor anterior."""
    _pass_id.reset(token)


def generate_pass_id() -> str:
    """Gera um novo pass_id curto (12 hex)."""
    return uuid.uuid4().hex[:12]
