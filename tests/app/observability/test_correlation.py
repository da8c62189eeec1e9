"""Testes do correlation_id por contexto."""

from __future__ import annotations

from app.observability import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("cid-1")
    try:
        assert get_correlation_id() == "cid-1"
    finally:
        reset_correlation_id(token)

    assert get_correlation_id() == ""


def test_set_correlation_id_generates_uuid_when_missing() -> None:
    token = set_correlation_id(None)
    try:
        assert len(get_correlation_id()) == 36
    finally:
        reset_correlation_id(token)


def test_correlation_scope_restores_previous_value() -> None:
    with correlation_scope("outer") as outer:
        with correlation_scope("inner") as inner:
            assert inner == "inner"
            assert get_correlation_id() == "inner"
        assert outer == "outer"
        assert get_correlation_id() == "outer"

    assert get_correlation_id() == ""
