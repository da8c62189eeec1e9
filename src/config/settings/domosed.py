"""Settings específicas da API Domosed.

Credenciais, URL da API e parâmetros do listener de webhook.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domosed.options import ServerOptions

# URL da API Domosed por padrão
DOMOSED_API_URL: str = "https://domosed.danyarub.ru/api/"


@dataclass(frozen=True)
class DomosedSettings:
    """Configurações da API Domosed.

    Attributes:
        access_token: Token de acesso do projeto (segredo do digest)
        api_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        webhook_url: URL pública registrada na API para receber transferências
        webhook_path: Path do POST local (começa com '/')
        webhook_host: Interface local do listener
        webhook_port: Porta local do listener (não entra na webhook_url)
    """

    access_token: str = ""
    api_url: str = DOMOSED_API_URL
    request_timeout_seconds: float = 30.0

    webhook_url: str = ""
    webhook_path: str = "/transfer"
    webhook_host: str = "0.0.0.0"
    webhook_port: int = 3000

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.access_token:
            errors.append("DOMOSED_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("DOMOSED_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.webhook_url:
            errors.append("DOMOSED_WEBHOOK_URL não configurado")

        if not self.webhook_path.startswith("/"):
            errors.append("DOMOSED_WEBHOOK_PATH deve começar com '/'")

        if not 0 <= self.webhook_port <= 65535:
            errors.append("DOMOSED_WEBHOOK_PORT deve estar entre 0 e 65535")

        return errors

    def server_options(self) -> ServerOptions:
        """Monta ServerOptions para Domosed.start()."""
        # Import local para evitar dependência circular
        from app.domosed.options import ServerOptions

        return ServerOptions(
            url=self.webhook_url,
            path=self.webhook_path,
            port=self.webhook_port,
            host=self.webhook_host,
        )


def _load_from_env() -> DomosedSettings:
    """Carrega DomosedSettings a partir de variáveis de ambiente."""
    return DomosedSettings(
        access_token=os.getenv("DOMOSED_ACCESS_TOKEN", ""),
        api_url=os.getenv("DOMOSED_API_URL", DOMOSED_API_URL),
        request_timeout_seconds=float(
            os.getenv("DOMOSED_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        webhook_url=os.getenv("DOMOSED_WEBHOOK_URL", ""),
        webhook_path=os.getenv("DOMOSED_WEBHOOK_PATH", "/transfer"),
        webhook_host=os.getenv("DOMOSED_WEBHOOK_HOST", "0.0.0.0"),
        webhook_port=int(os.getenv("DOMOSED_WEBHOOK_PORT", "3000")),
    )


@lru_cache(maxsize=1)
def get_domosed_settings() -> DomosedSettings:
    """Retorna instância cacheada de DomosedSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
