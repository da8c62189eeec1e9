"""Erros e helpers de parsing do envelope da API Domosed."""

from __future__ import annotations

from typing import Any

# Sentinela para envelopes sem `response`/`msg` ou com `error` incompleto
MALFORMED_ENVELOPE_CODE = 0
MALFORMED_ENVELOPE_MESSAGE = "malformed_envelope"


class APIError(Exception):
    """Erro estruturado retornado pela API Domosed.

    Attributes:
        code: Código numérico informado pela API (`error_code`)
        message: Mensagem legível informada pela API (`error_msg`)
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"Code {code}: {message}")
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"APIError(code={self.code!r}, message={self.message!r})"


def malformed_envelope_error() -> APIError:
    """Erro usado quando a resposta não segue o envelope conhecido."""
    return APIError(MALFORMED_ENVELOPE_CODE, MALFORMED_ENVELOPE_MESSAGE)


def parse_api_error(response_data: dict[str, Any]) -> APIError | None:
    """Extrai o erro do envelope da API.

    Args:
        response_data: Dict do response JSON

    Returns:
        APIError se o envelope trouxer `error`, None caso contrário
    """
    error_obj = response_data.get("error")
    if error_obj is None:
        return None

    if not isinstance(error_obj, dict):
        return malformed_envelope_error()

    error_code = error_obj.get("error_code", MALFORMED_ENVELOPE_CODE)
    error_message = error_obj.get("error_msg", MALFORMED_ENVELOPE_MESSAGE)
    return APIError(error_code, error_message)


def extract_message(response_data: Any) -> Any:
    """Retorna `response.msg` de um envelope de sucesso.

    Raises:
        APIError: Se o envelope tiver `error` ou não tiver `response.msg`
    """
    if not isinstance(response_data, dict):
        raise malformed_envelope_error()

    api_error = parse_api_error(response_data)
    if api_error is not None:
        raise api_error

    response = response_data.get("response")
    if not isinstance(response, dict) or "msg" not in response:
        raise malformed_envelope_error()

    return response["msg"]
