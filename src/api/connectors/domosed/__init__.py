"""Conector Domosed - adapter de borda para a API de pagamentos.

Este módulo é o único ponto de IO com a API Domosed.
Responsabilidades:
- Gateway de chamadas RPC (http_client)
- Erros e envelope da API
- Modelos de resposta e de notificação
- Digest de integridade e parsing do webhook
"""

from .api_errors import APIError, parse_api_error
from .http_client import DEFAULT_API_URL, DomosedHttpClient
from .models import IncomingPayment, MerchantInfo, Payment, PaymentsHistoryType, UsersBalance
from .signature import compute_payment_hash, validate_payment_hash

__all__ = [
    "DEFAULT_API_URL",
    "APIError",
    "DomosedHttpClient",
    "IncomingPayment",
    "MerchantInfo",
    "Payment",
    "PaymentsHistoryType",
    "UsersBalance",
    "compute_payment_hash",
    "parse_api_error",
    "validate_payment_hash",
]
