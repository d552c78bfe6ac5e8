"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthRefreshError,
    ConnectivityError,
    InfrastructureError,
    MarkAsReadError,
    RemoteApiError,
    StatisticsFetchError,
)

__all__ = [
    "AuthRefreshError",
    "ConnectivityError",
    "InfrastructureError",
    "MarkAsReadError",
    "RemoteApiError",
    "StatisticsFetchError",
]
