"""Aplicação ASGI do webhook Domosed.

`create_app` monta o FastAPI com a única rota POST do webhook; é usado
por Domosed.start(). `main` é o entrypoint de desenvolvimento.

Uso (desenvolvimento):
    DOMOSED_ACCESS_TOKEN=... DOMOSED_WEBHOOK_URL=https://example.com/transfer domosed-webhook

A porta local não entra na URL registrada: normalmente há um
proxy (NGINX com TLS) na frente do listener.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router

if TYPE_CHECKING:
    from api.connectors.domosed.models import IncomingPayment
    from app.domosed.options import DomosedOptions

logger = logging.getLogger(__name__)


def create_app(options: DomosedOptions, webhook_path: str) -> FastAPI:
    """Cria a aplicação FastAPI do webhook.

    Docs/OpenAPI ficam desabilitados: o listener expõe somente o webhook.
    """
    fastapi_app = FastAPI(
        title="Domosed webhook",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.include_router(create_api_router(options, webhook_path))

    logger.info("app_configured", extra={"webhook_path": webhook_path})
    return fastapi_app


def _log_payment(payment: IncomingPayment) -> None:
    logger.info(
        "payment_received",
        extra={"amount": payment.amount, "from_id": payment.from_id},
    )


async def serve_forever() -> None:
    """Registra o webhook, inicia o listener e mantém o processo vivo."""
    from app.bootstrap import validate_runtime_settings
    from app.domosed import Domosed
    from config.settings import get_domosed_settings

    validate_runtime_settings()
    settings = get_domosed_settings()

    domosed = Domosed.from_settings(settings)
    domosed.on_payment(_log_payment)
    await domosed.start(settings.server_options())

    server = domosed.server
    # Termina junto com o uvicorn (SIGINT/SIGTERM)
    while server is not None and server.is_running:
        await asyncio.sleep(1.0)
    await domosed.aclose()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    from app.bootstrap import initialize_app

    initialize_app()
    logger.info("Starting Domosed webhook listener")
    asyncio.run(serve_forever())


if __name__ == "__main__":
    main()
