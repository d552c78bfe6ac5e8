"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class ConnectivityError(InfrastructureError):
    """Sem rede: encaminhada ao supervisor de reconexão, nunca exibida ao usuário."""


class RemoteApiError(InfrastructureError):
    """Falha do serviço de email (auth, rate limit, resposta malformada).

    Attributes:
        status_code: Status HTTP quando conhecido.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_rate_limited(self) -> bool:
        """Retorna True se o serviço sinalizou throttling."""
        return self.status_code == 429


class StatisticsFetchError(RemoteApiError):
    """Falha nas consultas best-effort de estatísticas (rascunhos, labels)."""


class MarkAsReadError(RemoteApiError):
    """Falha ao remover o label UNREAD em lote."""


class AuthRefreshError(RemoteApiError):
    """Falha ao renovar o token de acesso."""
