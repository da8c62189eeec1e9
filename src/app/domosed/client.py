"""Cliente Domosed: métodos da API e recebimento de transferências.

Uso:
    domosed = Domosed(DomosedOptions(token="..."))

    domosed.on_payment(lambda payment: print(payment.amount))
    await domosed.start(ServerOptions(url="https://example.com/transfer", path="/transfer", port=3000))

    info = await domosed.get_merchant_info()
"""

from __future__ import annotations

import logging
from enum import Enum
from types import TracebackType
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from api.connectors.domosed.api_errors import malformed_envelope_error
from api.connectors.domosed.http_base import HttpClientConfig
from api.connectors.domosed.http_client import DomosedHttpClient, create_domosed_http_client
from api.connectors.domosed.models import (
    MerchantInfo,
    Payment,
    PaymentsHistoryType,
    UsersBalance,
)
from app.app import create_app
from app.domosed.options import DomosedOptions, PaymentHandler
from app.domosed.server import WebhookServer

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from app.domosed.options import ServerOptions
    from config.settings import DomosedSettings

logger = logging.getLogger(__name__)

PAYMENT_LINK_PREFIX = "https://vk.com/app7594692#transfer-"


class ReceiverState(str, Enum):
    """Estado do recebimento de webhooks."""

    UNREGISTERED = "unregistered"
    REGISTERING = "registering"
    LISTENING = "listening"


class Domosed:
    """Cliente da API Domosed.

    Todos os métodos de negócio passam por `call`. O listener de webhook
    é criado uma única vez por `start` e vive até o fim do processo.
    """

    def __init__(
        self,
        options: DomosedOptions,
        http_config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        gateway: DomosedHttpClient | None = None,
    ) -> None:
        self._gateway = gateway or DomosedHttpClient(
            access_token=options.token,
            api_url=options.api_url,
            config=http_config,
            http_client=http_client,
        )
        options.api_url = self._gateway.api_url
        self.options = options
        self._state = ReceiverState.UNREGISTERED
        self._server: WebhookServer | None = None

    @classmethod
    def from_settings(cls, settings: DomosedSettings | None = None) -> Domosed:
        """Cria o cliente a partir de DomosedSettings (ou do ambiente)."""
        from config.settings import get_domosed_settings

        domosed = settings or get_domosed_settings()
        return cls(
            DomosedOptions(token=domosed.access_token, api_url=domosed.api_url),
            gateway=create_domosed_http_client(domosed),
        )

    @property
    def state(self) -> ReceiverState:
        return self._state

    @property
    def server(self) -> WebhookServer | None:
        return self._server

    async def call(self, method: str, params: Mapping[str, Any] | None = None) -> Any:
        """Chama qualquer método da API e retorna `response.msg`."""
        return await self._gateway.call(method, params)

    async def get_merchant_info(self) -> MerchantInfo:
        """Informações do projeto.

        Raises:
            APIError: Se a API falhar ou `msg` não tiver o formato de MerchantInfo
            TransportError: Se a chamada falhar na rede
        """
        msg = await self.call("merchants.getInfo")
        try:
            return MerchantInfo.model_validate(msg)
        except ValidationError as exc:
            logger.warning("domosed_unexpected_merchant_info", extra={"method": "merchants.getInfo"})
            raise malformed_envelope_error() from exc

    async def edit_merchant_info(self, name: str, avatar: str, group_id: int) -> str:
        """Edita nome, avatar (link direto) e comunidade do projeto.

        Returns:
            "New parametrs updated" em caso de sucesso
        """
        return await self.call(
            "merchants.edit",
            {"name": name, "avatar": avatar, "group_id": group_id},
        )

    async def send_verify(self) -> str:
        """Envia o projeto para moderação."""
        return await self.call("merchants.sendVerify")

    async def send_payment(self, to_id: int, amount: int) -> Payment:
        """Transfere `amount` moedas para o usuário `to_id`."""
        return await self.call("payment.send", {"toId": to_id, "amount": amount})

    async def get_payments_history(self, type: PaymentsHistoryType, limit: int) -> list[Payment]:
        """Histórico de transferências (limit de 1 a 50)."""
        return await self.call("payment.getHistory", {"type": type, "limit": limit})

    async def get_balance(self, user_ids: int | list[int]) -> UsersBalance:
        """Saldo de um ou mais usuários (no máximo 20)."""
        return await self.call("users.getBalance", {"userIds": user_ids})

    async def get_payment_link(self) -> str:
        """Link para transferir moedas ao projeto."""
        info = await self.get_merchant_info()
        return f"{PAYMENT_LINK_PREFIX}{info.id}"

    async def set_webhook(self, url: str) -> Any:
        """Registra na API o endereço que recebe as transferências."""
        return await self.call("merchants.webhook.set", {"url": url})

    def on_payment(self, callback: PaymentHandler | None) -> PaymentHandler | None:
        """Registra o callback de transferências (substitui o anterior).

        Pode ser usado como decorator. O callback é lido a cada request,
        então a troca vale para as próximas notificações.
        """
        self.options.on_payment = callback
        return callback

    async def start(self, server_options: ServerOptions) -> None:
        """Registra o webhook na API e inicia o listener.

        O registro acontece antes de abrir a porta: se falhar, nenhum
        listener é criado e o erro é propagado.

        Raises:
            APIError: Se a API recusar o registro
            TransportError: Se a chamada de registro falhar na rede
            OSError: Se a porta não puder ser aberta
            RuntimeError: Se o listener já tiver sido iniciado
        """
        if self._state is not ReceiverState.UNREGISTERED:
            raise RuntimeError("webhook_receiver_already_started")

        self._state = ReceiverState.REGISTERING
        try:
            await self.set_webhook(server_options.url)
            logger.info("webhook_registered", extra={"path": server_options.path})

            server = WebhookServer(
                create_app(self.options, server_options.path),
                host=server_options.host,
                port=server_options.port,
            )
            await server.start()
        except BaseException:
            self._state = ReceiverState.UNREGISTERED
            raise

        self._server = server
        self._state = ReceiverState.LISTENING

    async def aclose(self) -> None:
        """Fecha o cliente HTTP (o listener, se ativo, continua)."""
        await self._gateway.aclose()

    async def __aenter__(self) -> Domosed:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
