"""Endpoint de webhook das transferências Domosed.

Endpoint:
- POST <path>: notificação de transferência recebida

Fluxo:
1. Lê o body bruto e valida JSON + campos de IncomingPayment
2. Recalcula md5(token + amount + fromId) e compara com `hash`
3. Se conferir, chama o callback registrado (lido no momento do request)

Segurança:
- Digest divergente responde 400 sem body e nunca chega ao callback
- Erros de payload e do callback não derrubam o listener
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from api.connectors.domosed.webhook.receive import (
    InvalidHashError,
    WebhookRequestError,
    parse_payment_notification,
)
from app.observability import CORRELATION_HEADER, correlation_scope

if TYPE_CHECKING:
    from app.domosed.options import DomosedOptions

logger = logging.getLogger(__name__)

ACCEPTED_BODY = "ok"


def _rejected() -> Response:
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


async def handle_payment_notification(request: Request, options: DomosedOptions) -> Response:
    """Autentica a notificação e entrega ao callback registrado.

    Returns:
        200 "ok" se aceita, 400 se rejeitada, 500 se o callback falhar.
    """
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        raw_body = await request.body()

        try:
            payment = parse_payment_notification(raw_body, options.token)
        except InvalidHashError:
            logger.warning(
                "webhook_hash_invalid",
                extra={"correlation_id": correlation_id, "payload_size": len(raw_body)},
            )
            return _rejected()
        except WebhookRequestError as exc:
            logger.warning(
                "webhook_payload_invalid",
                extra={"correlation_id": correlation_id, "error": str(exc)},
            )
            return _rejected()

        handler = options.on_payment
        if handler is None:
            logger.info("webhook_payment_without_handler", extra={"correlation_id": correlation_id})
            return Response(content=ACCEPTED_BODY, media_type="text/plain")

        try:
            result = handler(payment)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("webhook_handler_failed", extra={"correlation_id": correlation_id})
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(
            "webhook_payment_accepted",
            extra={"correlation_id": correlation_id, "amount": payment.amount},
        )
        return Response(content=ACCEPTED_BODY, media_type="text/plain")


def create_webhook_router(options: DomosedOptions, path: str) -> APIRouter:
    """Cria router com a única rota POST do webhook.

    Args:
        options: Opções do cliente (token e callback, lidos a cada request)
        path: Path do POST, começando com '/'
    """
    router = APIRouter()

    async def receive_payment(request: Request) -> Response:
        return await handle_payment_notification(request, options)

    router.add_api_route(
        path,
        receive_payment,
        methods=["POST"],
        response_model=None,
        include_in_schema=False,
    )
    return router
