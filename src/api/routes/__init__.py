"""Rotas HTTP — adapter de entrada do webhook Domosed.

Responsabilidades:
- Definir o endpoint POST do webhook
- Delegar parsing e verificação ao connector
- Responder com o status HTTP adequado

Agregação:
- router.py: registra os routers no app
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
