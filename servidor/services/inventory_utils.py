"""Utilidades numericas para precios, cantidades y montos."""

from __future__ import annotations

import math
from numbers import Real

from shared.errors import ValidationError


def is_number(value: object) -> bool:
    """Indica si el valor es un numero real finito (bool no cuenta como numero).

    Enteros que no caben en un float tampoco cuentan: saldo y precios se
    operan como float.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_non_negative_number(value: object) -> bool:
    """Indica si el valor es un numero finito mayor o igual a cero."""
    return is_number(value) and value >= 0


def require_non_negative(value: object, field_name: str) -> float:
    """Valida que el valor sea un numero no negativo y lo retorna."""
    if not is_non_negative_number(value):
        raise ValidationError(f"{field_name} debe ser un numero no negativo: {value!r}")
    return value


def require_positive(value: object, field_name: str) -> float:
    """Valida que el valor sea un numero mayor a cero y lo retorna."""
    if not is_number(value) or value <= 0:
        raise ValidationError(f"{field_name} debe ser un numero mayor a 0: {value!r}")
    return value


def compute_total_price(price: float, quantity: float) -> float:
    """Calcula el precio total de una venta."""
    return price * quantity


def covers_amount(available: float, required: float) -> bool:
    """Indica si el monto disponible cubre el requerido, tolerando error de float."""
    return available >= required or math.isclose(available, required, abs_tol=1e-9)


def format_amount(amount: float) -> str:
    """Formatea un monto con dos decimales."""
    return f"${amount:,.2f}"


def format_quantity(quantity: float) -> str:
    """Formatea una cantidad sin decimales cuando es entera."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:g}"
