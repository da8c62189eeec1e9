"""Parse e validação de notificações de pagamento (sem expor token)."""

from __future__ import annotations

import json

from pydantic import ValidationError

from ..models import IncomingPayment
from ..signature import validate_payment_hash


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


class InvalidPayloadError(WebhookRequestError):
    """Payload sem os campos obrigatórios de IncomingPayment."""


class InvalidHashError(WebhookRequestError):
    """Digest do payload não confere com o recalculado."""


def parse_payment_notification(raw_body: bytes, access_token: str) -> IncomingPayment:
    """Parseia o JSON do webhook e valida o digest de integridade.

    Args:
        raw_body: Corpo bruto do request
        access_token: Token do projeto usado no digest

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
        InvalidPayloadError: Se faltarem campos ou tiverem tipo inválido
        InvalidHashError: Se o digest não conferir

    Returns:
        IncomingPayment autenticado
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        payment = IncomingPayment.model_validate(payload)
    except ValidationError as exc:
        raise InvalidPayloadError("invalid_payload") from exc

    if not validate_payment_hash(access_token, payment.amount, payment.from_id, payment.hash):
        raise InvalidHashError("invalid_hash")

    return payment
