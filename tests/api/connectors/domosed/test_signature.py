"""Testes do digest de integridade das notificações."""

from __future__ import annotations

import hashlib

import pytest

from api.connectors.domosed.signature import (
    compute_payment_hash,
    render_number,
    validate_payment_hash,
)


def _flip_first_char(value: str) -> str:
    first = "1" if value[0] != "1" else "2"
    return first + value[1:]


def test_compute_payment_hash_concatenates_token_amount_from_id() -> None:
    expected = hashlib.md5(b"secret1001").hexdigest()

    assert compute_payment_hash("secret", 100, 1) == expected


def test_compute_payment_hash_is_deterministic() -> None:
    assert compute_payment_hash("secret", 250, 73845201) == compute_payment_hash(
        "secret", 250, 73845201
    )


def test_integral_float_renders_like_integer() -> None:
    assert render_number(100.0) == "100"
    assert render_number(100.5) == "100.5"
    assert compute_payment_hash("secret", 100.0, 1) == compute_payment_hash("secret", 100, 1)


@pytest.mark.parametrize(
    ("value", "rendered"),
    [
        (0.1, "0.1"),
        (-2.5, "-2.5"),
        (0.0, "0"),
        (0.000001, "0.000001"),
        (1.5e-7, "1.5e-7"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.25e22, "1.25e+22"),
        (2**53 + 1, "9007199254740992"),
    ],
)
def test_render_number_follows_javascript_rules(value: float, rendered: str) -> None:
    assert render_number(value) == rendered


def test_exponent_amount_digest_matches_provider_rendering() -> None:
    digest = hashlib.md5(b"secret1e+211").hexdigest()

    assert validate_payment_hash("secret", 1e21, 1, digest) is True


def test_validate_payment_hash_accepts_exact_digest() -> None:
    digest = hashlib.md5(b"secret1001").hexdigest()

    assert validate_payment_hash("secret", 100, 1, digest) is True


def test_validate_payment_hash_rejects_flipped_char() -> None:
    digest = _flip_first_char(hashlib.md5(b"secret1001").hexdigest())

    assert validate_payment_hash("secret", 100, 1, digest) is False


def test_validate_payment_hash_is_case_sensitive() -> None:
    digest = hashlib.md5(b"secret1001").hexdigest().upper()

    assert validate_payment_hash("secret", 100, 1, digest) is False


def test_validate_payment_hash_rejects_prefix_and_non_ascii() -> None:
    digest = hashlib.md5(b"secret1001").hexdigest()

    assert validate_payment_hash("secret", 100, 1, digest[:16]) is False
    assert validate_payment_hash("secret", 100, 1, "хэш") is False


def test_validate_payment_hash_depends_on_token() -> None:
    digest = compute_payment_hash("secret", 100, 1)

    assert validate_payment_hash("other", 100, 1, digest) is False
