"""Sonda de conectividade."""

from notifier.infra.connectivity.http_probe import HttpConnectivityProbe

__all__ = ["HttpConnectivityProbe"]
