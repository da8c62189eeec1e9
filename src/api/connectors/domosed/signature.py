"""Digest MD5 de integridade das notificações de pagamento."""

from __future__ import annotations

import hashlib
import hmac
import math
from decimal import Decimal


def render_number(value: int | float) -> str:
    """Renderiza número como o provider (JavaScript) concatena.

    Inteiros sem ".0" (100.0 -> "100"); notação exponencial só fora de
    [1e-6, 1e21) e no formato do JS (1e21 -> "1e+21", 1.5e-7 -> "1.5e-7").
    Inteiros acima de 2**53 perdem precisão como no JS.
    """
    try:
        number = float(value)
    except OverflowError:
        return "Infinity" if value > 0 else "-Infinity"

    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    # repr dá os dígitos mais curtos que reproduzem o float, como o JS
    _, digit_tuple, exponent = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def compute_payment_hash(access_token: str, amount: int | float, from_id: int) -> str:
    """Calcula md5(token + amount + fromId) em hexadecimal.

    Args:
        access_token: Token do projeto (segredo compartilhado)
        amount: Quantidade transferida
        from_id: ID do remetente

    Returns:
        Digest hexadecimal (minúsculo)
    """
    raw = access_token + render_number(amount) + render_number(from_id)
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


def validate_payment_hash(
    access_token: str,
    amount: int | float,
    from_id: int,
    received_hash: str,
) -> bool:
    """Compara o digest recebido com o recalculado (igualdade exata)."""
    expected = compute_payment_hash(access_token, amount, from_id)
    return hmac.compare_digest(expected.encode("utf-8"), received_hash.encode("utf-8"))
