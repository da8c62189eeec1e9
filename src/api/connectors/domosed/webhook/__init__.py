"""Webhook Domosed: parsing seguro e verificação do digest."""

from .receive import (
    InvalidHashError,
    InvalidJsonError,
    InvalidPayloadError,
    WebhookRequestError,
    parse_payment_notification,
)

__all__ = [
    "InvalidHashError",
    "InvalidJsonError",
    "InvalidPayloadError",
    "WebhookRequestError",
    "parse_payment_notification",
]
