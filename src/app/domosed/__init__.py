"""Cliente Domosed — fachada pública da biblioteca.

Uso:
    from app.domosed import Domosed, DomosedOptions, ServerOptions
"""

from app.domosed.client import Domosed, ReceiverState
from app.domosed.options import DomosedOptions, PaymentHandler, ServerOptions
from app.domosed.server import WebhookServer

__all__ = [
    "Domosed",
    "DomosedOptions",
    "PaymentHandler",
    "ReceiverState",
    "ServerOptions",
    "WebhookServer",
]
