"""Opções do cliente Domosed e do listener de webhook."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from api.connectors.domosed.models import IncomingPayment
from config.settings.domosed import DOMOSED_API_URL

# Callback de transferências; pode ser síncrono ou retornar awaitable
PaymentHandler: TypeAlias = Callable[[IncomingPayment], Any]


@dataclass
class DomosedOptions:
    """Configuração de uma instância Domosed.

    Attributes:
        token: Token de acesso do projeto
        api_url: URL base da API
        on_payment: Callback de transferências recebidas (lido a cada request)
    """

    token: str
    api_url: str = DOMOSED_API_URL
    on_payment: PaymentHandler | None = None


@dataclass(frozen=True)
class ServerOptions:
    """Parâmetros de Domosed.start().

    Attributes:
        url: Endereço público registrado na API (ex: atrás de um proxy NGINX)
        path: Path do POST local, começando com '/'
        port: Porta local (não é adicionada à url)
        host: Interface local do listener
    """

    url: str
    path: str
    port: int
    host: str = "0.0.0.0"

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("url é obrigatória")
        if not self.path.startswith("/"):
            raise ValueError("path deve começar com '/'")
        if not 0 <= self.port <= 65535:
            raise ValueError("port deve estar entre 0 e 65535")
