"""Sonda de conectividade via HTTP leve (generate_204)."""

from __future__ import annotations

import logging

import httpx

from notifier.protocols.connectivity import ConnectivityGateProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "http_connectivity_probe"


class HttpConnectivityProbe(ConnectivityGateProtocol):
    """Considera a rede disponivel quando a URL responde sem erro de servidor."""

    __slots__ = ("_http_client", "_timeout", "_url")

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout_seconds
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    async def is_available(self) -> bool:
        client = await self._get_http_client()
        try:
            response = await client.get(self._url)
        except httpx.HTTPError as exc:
            logger.info(
                "connectivity_probe_failed",
                extra={"component": _COMPONENT, "error_type": type(exc).__name__},
            )
            return False
        return response.status_code < 500

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


__all__ = ["HttpConnectivityProbe"]
