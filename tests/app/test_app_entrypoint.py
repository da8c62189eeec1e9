"""Testes do entrypoint de desenvolvimento (serve_forever)."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

import app.domosed
from app import app as app_module
from app.domosed.options import ServerOptions


class _FakeDomosed:
    def __init__(self) -> None:
        self.handler = None
        self.started_with: ServerOptions | None = None
        self.closed = False
        self.server = SimpleNamespace(is_running=False)

    def on_payment(self, handler):
        self.handler = handler
        return handler

    async def start(self, server_options: ServerOptions) -> None:
        self.started_with = server_options

    async def aclose(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_serve_forever_registers_handler_and_starts(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeDomosed()
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DOMOSED_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("DOMOSED_WEBHOOK_URL", "https://example.com/transfer")
    monkeypatch.setenv("DOMOSED_WEBHOOK_PORT", "3001")
    monkeypatch.setattr(
        app.domosed.Domosed,
        "from_settings",
        classmethod(lambda cls, settings=None: fake),
    )

    await app_module.serve_forever()

    assert fake.handler is not None
    assert fake.started_with == ServerOptions(
        url="https://example.com/transfer",
        path="/transfer",
        port=3001,
    )
    assert fake.closed is True
