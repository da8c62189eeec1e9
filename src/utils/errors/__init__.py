"""Exceções utilitárias compartilhadas."""

from .exceptions import InfrastructureError, TransportError

__all__ = [
    "InfrastructureError",
    "TransportError",
]
