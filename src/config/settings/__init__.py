"""Agregador de settings do cliente Domosed.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider settings
from config.settings.domosed import (
    DOMOSED_API_URL,
    DomosedSettings,
    get_domosed_settings,
)

__all__ = [
    # Constants
    "DOMOSED_API_URL",
    # Base
    "BaseSettings",
    # Provider
    "DomosedSettings",
    "Environment",
    "get_base_settings",
    "get_domosed_settings",
]
