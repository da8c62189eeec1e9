"""Cliente HTTP especializado para a API Domosed.

Estende HttpClient genérico com o contrato RPC do Domosed:
- POST em `<api_url><method>` com corpo JSON
- `access_token` anexado a toda chamada (nunca enviada sem token)
- Envelope `{"response": {"msg": ...}}` ou `{"error": {...}}`
- Erros da API viram APIError; falhas de rede/JSON viram TransportError
- Logging estruturado sem token nem parâmetros
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.domosed.api_errors import APIError, extract_message
from api.connectors.domosed.api_logging import log_api_error, log_success
from api.connectors.domosed.http_base import HttpClient, HttpClientConfig
from config.settings.domosed import DOMOSED_API_URL
from utils.errors import TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from config.settings import DomosedSettings

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_API_URL = DOMOSED_API_URL


def normalize_api_url(api_url: str | None) -> str:
    """Garante URL base terminando com uma única barra."""
    return (api_url or DEFAULT_API_URL).rstrip("/") + "/"


class DomosedHttpClient(HttpClient):
    """Gateway de chamadas à API Domosed.

    Todo método de negócio é uma chamada a `call` com o nome do método
    (ex: "payment.send") e seus parâmetros.
    """

    def __init__(
        self,
        access_token: str,
        api_url: str | None = None,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o gateway.

        Args:
            access_token: Token de acesso do projeto
            api_url: URL base da API (padrão: DEFAULT_API_URL)
            config: Configuração HTTP base
            http_client: Cliente httpx já criado (útil em testes)

        Raises:
            ValueError: Se access_token estiver vazio
        """
        _require_token(access_token)
        super().__init__(config, http_client)
        self._access_token = access_token
        self.api_url = normalize_api_url(api_url)

    async def call(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """Chama qualquer método da API.

        Args:
            method: Nome do método (ex: "merchants.getInfo")
            params: Parâmetros do método, serializáveis em JSON

        Returns:
            Conteúdo de `response.msg`, sem validação de schema

        Raises:
            ValueError: Se method estiver vazio
            APIError: Se a API retornar `error` ou envelope mal-formado
            TransportError: Se falhar a rede ou a resposta não for JSON
        """
        if not method or not method.strip():
            raise ValueError("method é obrigatório")

        url = self.api_url + method
        payload = self._build_payload(params)
        response = await self.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        return self._process_response(response, method)

    def _build_payload(self, params: Mapping[str, Any] | None) -> dict[str, Any]:
        """Monta corpo com o token configurado (sempre prevalece)."""
        _require_token(self._access_token)
        return {**(params or {}), "access_token": self._access_token}

    def _process_response(self, response: httpx.Response, method: str) -> Any:
        """Processa o envelope da API Domosed."""
        try:
            response_data = response.json()
        except ValueError as exc:
            logger.error(
                "domosed_invalid_json_response",
                extra={"method": method, "status_code": response.status_code},
            )
            raise TransportError(
                "invalid_json_response",
                status_code=response.status_code,
            ) from exc

        try:
            message = extract_message(response_data)
        except APIError as api_error:
            log_api_error(api_error, method)
            raise

        log_success(method, response.status_code)
        return message


def _require_token(access_token: str) -> None:
    if not access_token or not access_token.strip():
        raise ValueError(
            "access_token é obrigatório para chamadas à API. "
            "Verifique se DOMOSED_ACCESS_TOKEN está configurado."
        )


def create_domosed_http_client(
    settings: DomosedSettings | None = None,
) -> DomosedHttpClient:
    """Factory para criar o gateway a partir das settings.

    Args:
        settings: DomosedSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para a API Domosed.
    """
    # Import local para evitar dependência circular
    from config.settings import get_domosed_settings

    domosed = settings or get_domosed_settings()
    config = HttpClientConfig(timeout_seconds=domosed.request_timeout_seconds)
    return DomosedHttpClient(
        access_token=domosed.access_token,
        api_url=domosed.api_url,
        config=config,
    )
