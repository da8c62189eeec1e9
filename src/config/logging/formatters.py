"""Formatter JSON dos logs do cliente Domosed.

Todo record sai com: asctime, level, logger, message, correlation_id, service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa para saída estável
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com os campos padronizados.

    Campos passados via `extra` (ex: method, error_code) são anexados
    ao objeto JSON pelo próprio JsonFormatter.
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
