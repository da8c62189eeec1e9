"""Agregador de rotas do listener de webhook.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(options, "/transfer"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.domosed.webhook import create_webhook_router

if TYPE_CHECKING:
    from app.domosed.options import DomosedOptions


def create_api_router(options: DomosedOptions, webhook_path: str) -> APIRouter:
    """Cria router principal com a rota do webhook registrada.

    Returns:
        APIRouter com exatamente uma rota (POST webhook_path).
    """
    api_router = APIRouter()
    api_router.include_router(create_webhook_router(options, webhook_path), tags=["domosed"])
    return api_router
