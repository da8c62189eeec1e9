"""Modelos de dados da API Domosed.

Os formatos de resposta pertencem ao provider; aqui só são tipados
os campos usados pela biblioteca. Campos extras são preservados.
"""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

PaymentsHistoryType: TypeAlias = Literal["all", "in", "out"]

# Repassados como vieram da API (`response.msg`)
Payment: TypeAlias = dict[str, Any]
UsersBalance: TypeAlias = dict[str, Any]


class IncomingPayment(BaseModel):
    """Notificação de transferência recebida via webhook."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = Field("transfer", description="Tipo do evento (a API envia \"transfer\").")
    amount: int | float = Field(..., description="Quantidade de moedas transferida.")
    from_id: int = Field(..., alias="fromId", description="ID do remetente.")
    hash: str = Field(..., description="Digest MD5 (hex) calculado pela API.")

    def to_wire(self) -> dict[str, Any]:
        """Retorna o payload no formato recebido (fromId, extras, sem defaults)."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class MerchantInfo(BaseModel):
    """Informações do projeto (merchant)."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str = ""
    description: str = ""
    group_id: int | None = None
    avatar: str = ""
    money: int | float = 0
    is_allow: bool = False
    webhook_url: str | None = None
