"""Testes para config.settings (carregamento do ambiente e validação)."""

from __future__ import annotations

import pytest

from app.domosed.options import ServerOptions
from config.settings import (
    DOMOSED_API_URL,
    DomosedSettings,
    get_base_settings,
    get_domosed_settings,
)


def test_domosed_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DOMOSED_ACCESS_TOKEN",
        "DOMOSED_API_URL",
        "DOMOSED_WEBHOOK_URL",
        "DOMOSED_WEBHOOK_PATH",
        "DOMOSED_WEBHOOK_PORT",
        "DOMOSED_REQUEST_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_domosed_settings()

    assert settings.api_url == DOMOSED_API_URL
    assert settings.webhook_path == "/transfer"
    assert settings.webhook_port == 3000
    assert settings.request_timeout_seconds == 30.0


def test_domosed_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOMOSED_ACCESS_TOKEN", "tok")
    monkeypatch.setenv("DOMOSED_API_URL", "http://local/api/")
    monkeypatch.setenv("DOMOSED_REQUEST_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("DOMOSED_WEBHOOK_URL", "https://example.com/transfer")
    monkeypatch.setenv("DOMOSED_WEBHOOK_PATH", "/hook")
    monkeypatch.setenv("DOMOSED_WEBHOOK_HOST", "127.0.0.1")
    monkeypatch.setenv("DOMOSED_WEBHOOK_PORT", "8080")

    settings = get_domosed_settings()

    assert settings.access_token == "tok"
    assert settings.api_url == "http://local/api/"
    assert settings.request_timeout_seconds == 5.0
    assert settings.validate() == []
    assert settings.server_options() == ServerOptions(
        url="https://example.com/transfer",
        path="/hook",
        port=8080,
        host="127.0.0.1",
    )


def test_get_domosed_settings_is_cached() -> None:
    assert get_domosed_settings() is get_domosed_settings()


def test_domosed_settings_validate_reports_errors() -> None:
    settings = DomosedSettings(
        access_token="",
        request_timeout_seconds=0,
        webhook_url="",
        webhook_path="transfer",
        webhook_port=70000,
    )

    errors = settings.validate()

    assert "DOMOSED_ACCESS_TOKEN não configurado" in errors
    assert "DOMOSED_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors
    assert "DOMOSED_WEBHOOK_URL não configurado" in errors
    assert "DOMOSED_WEBHOOK_PATH deve começar com '/'" in errors
    assert "DOMOSED_WEBHOOK_PORT deve estar entre 0 e 65535" in errors


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("prod", "production"), ("staging", "staging"), ("qualquer", "development")],
)
def test_base_settings_environment(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
) -> None:
    monkeypatch.setenv("ENVIRONMENT", raw)

    assert get_base_settings().environment == expected


def test_base_settings_log_level_is_upper(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert get_base_settings().log_level == "DEBUG"
