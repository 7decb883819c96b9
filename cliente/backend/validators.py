"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math

from servidor.domain.models import Selection
from shared.errors import ValidationError

_SELECTION_LOOKUP: dict[str, str] = {
    **{selection.name.casefold(): selection.value for selection in Selection},
    **{selection.value.casefold(): selection.value for selection in Selection},
}


def parse_amount(raw_amount: str | float) -> float:
    """Convierte un monto ingresado en numero no negativo."""
    amount = _parse_number(raw_amount, "El monto")
    if amount < 0:
        raise ValidationError(f"El monto no puede ser negativo: {raw_amount}")
    return amount


def parse_quantity(raw_quantity: str | float) -> float:
    """Convierte una cantidad ingresada en numero mayor a 0."""
    quantity = _parse_number(raw_quantity, "La cantidad")
    if quantity <= 0:
        raise ValidationError(f"La cantidad debe ser mayor a 0: {raw_quantity}")
    return quantity


def normalize_selection_name(raw_selection: str) -> str:
    """Resuelve el nombre canonico de una seleccion ignorando mayusculas.

    Si el texto no corresponde a ninguna seleccion conocida se retorna tal
    cual (sin espacios), y el servidor decide como rechazarlo.
    """
    cleaned = raw_selection.strip()
    if not cleaned:
        raise ValidationError("La seleccion no puede estar vacia.")

    lookup_key = cleaned.replace(" ", "").casefold()
    return _SELECTION_LOOKUP.get(lookup_key, _SELECTION_LOOKUP.get(cleaned.casefold(), cleaned))


def _parse_number(raw_value: str | float, label: str) -> float:
    """Parsea un numero aceptando coma o punto como separador decimal."""
    if isinstance(raw_value, bool):
        raise ValidationError(f"{label} debe ser numerico: {raw_value}")

    if isinstance(raw_value, (int, float)):
        try:
            value = float(raw_value)
        except OverflowError as exc:
            raise ValidationError(f"{label} es demasiado grande: {raw_value}") from exc
    else:
        cleaned = raw_value.strip().replace(",", ".")
        if not cleaned:
            raise ValidationError(f"{label} no puede estar vacio.")
        try:
            value = float(cleaned)
        except ValueError as exc:
            raise ValidationError(f"{label} debe ser numerico: {raw_value}") from exc

    if not math.isfinite(value):
        raise ValidationError(f"{label} debe ser un numero finito: {raw_value}")
    return value
