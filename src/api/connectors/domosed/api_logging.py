"""Helpers de logging para a API Domosed (sem token nem parâmetros)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .api_errors import APIError

logger = logging.getLogger(__name__)


def log_api_error(api_error: APIError, method: str) -> None:
    """Loga erro da API sem expor dados sensíveis."""
    logger.warning(
        "domosed_api_error",
        extra={
            "method": method,
            "error_code": api_error.code,
        },
    )


def log_success(method: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "domosed_call_succeeded",
        extra={
            "method": method,
            "status_code": status_code,
        },
    )
