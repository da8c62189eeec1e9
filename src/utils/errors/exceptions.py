"""Exceções de infraestrutura compartilhadas entre as camadas."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (rede, IO)."""


class TransportError(InfrastructureError):
    """Falha de transporte na chamada à API remota.

    Cobre conexão recusada, timeout e corpo de resposta que não é JSON.
    Nunca carrega token ou parâmetros da chamada.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
