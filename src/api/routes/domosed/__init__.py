"""Rotas do webhook Domosed."""

from api.routes.domosed.webhook import create_webhook_router, handle_payment_notification

__all__ = ["create_webhook_router", "handle_payment_notification"]
