"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from utils.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas (sem retry)."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = http_client or httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
        )

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            return await self._client.post(
                url,
                json=json,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"timeout_seconds": self._config.timeout_seconds})
            raise TransportError("http_timeout") from exc
        except httpx.RequestError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise TransportError("http_connection_error") from exc

    async def aclose(self) -> None:
        await self._client.aclose()
