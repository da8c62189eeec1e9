"""Testes do parsing de erros do envelope Domosed."""

from __future__ import annotations

import pytest

from api.connectors.domosed.api_errors import (
    MALFORMED_ENVELOPE_CODE,
    MALFORMED_ENVELOPE_MESSAGE,
    APIError,
    extract_message,
    parse_api_error,
)


def test_parse_api_error_returns_none_without_error() -> None:
    assert parse_api_error({"response": {"msg": 1}}) is None


def test_parse_api_error_reads_code_and_message() -> None:
    error = parse_api_error({"error": {"error_code": 15, "error_msg": "invalid url"}})

    assert isinstance(error, APIError)
    assert (error.code, error.message) == (15, "invalid url")


def test_parse_api_error_fills_missing_fields_with_sentinel() -> None:
    error = parse_api_error({"error": {}})

    assert error is not None
    assert error.code == MALFORMED_ENVELOPE_CODE
    assert error.message == MALFORMED_ENVELOPE_MESSAGE


def test_extract_message_returns_msg_verbatim() -> None:
    msg = {"id": 1, "nested": [1, 2]}
    assert extract_message({"response": {"msg": msg}}) is msg


def test_extract_message_accepts_falsy_msg() -> None:
    assert extract_message({"response": {"msg": 0}}) == 0


def test_extract_message_raises_api_error_from_envelope() -> None:
    with pytest.raises(APIError, match="Code 5: User authorization failed"):
        extract_message({"error": {"error_code": 5, "error_msg": "User authorization failed"}})


def test_api_error_repr() -> None:
    assert repr(APIError(1, "x")) == "APIError(code=1, message='x')"
