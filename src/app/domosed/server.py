"""Listener HTTP do webhook (uvicorn em task de background)."""

from __future__ import annotations

import asyncio
import logging
import socket
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

STARTUP_POLL_SECONDS = 0.05


def bind_socket(host: str, port: int) -> socket.socket:
    """Abre socket TCP em (host, port); OSError se a porta estiver ocupada."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


class WebhookServer:
    """Servidor do webhook, vivo durante todo o processo.

    Não há operação de parada: a task roda até o processo terminar
    (ou até o uvicorn receber SIGINT/SIGTERM).
    """

    def __init__(self, app: FastAPI, host: str, port: int) -> None:
        self._app = app
        self._host = host
        self._port = port
        self._server: uvicorn.Server | None = None
        self._task: asyncio.Task[None] | None = None
        self._socket: socket.socket | None = None

    @property
    def bound_port(self) -> int | None:
        """Porta efetivamente aberta (útil com port=0)."""
        if self._socket is None:
            return None
        return self._socket.getsockname()[1]

    @property
    def started(self) -> bool:
        return self._server is not None and self._server.started

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Abre o socket, inicia o uvicorn e retorna quando estiver aceitando conexões.

        Raises:
            OSError: Se não for possível abrir a porta
            RuntimeError: Se o servidor parar antes de iniciar
        """
        if self._task is not None:
            raise RuntimeError("webhook_server_already_started")

        self._socket = bind_socket(self._host, self._port)
        # log_config=None preserva o logging configurado pelo processo
        config = uvicorn.Config(self._app, log_config=None, access_log=False)
        self._server = uvicorn.Server(config)
        self._task = asyncio.create_task(self._server.serve(sockets=[self._socket]))

        try:
            while not self._server.started:
                if self._task.done():
                    # Propaga a exceção da task, se houver
                    self._task.result()
                    raise RuntimeError("webhook_server_stopped_before_start")
                await asyncio.sleep(STARTUP_POLL_SECONDS)
        except BaseException:
            self._task.cancel()
            self._socket.close()
            raise

        logger.info(
            "webhook_server_listening",
            extra={"host": self._host, "port": self.bound_port},
        )
