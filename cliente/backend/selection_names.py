"""Utilidades para resolver nombres visibles e iconos de selecciones."""

from __future__ import annotations

import re

from servidor.domain.models import Selection

KNOWN_SELECTION_DISPLAY_NAMES: dict[str, str] = {
    "Soda": "Bebida",
    "DietSoda": "Bebida Light",
    "Chips": "Papas Fritas",
    "Cookie": "Galleta",
    "Sandwich": "Sándwich",
    "Wrap": "Wrap de Pollo",
    "CandyBar": "Barra de Chocolate",
    "PopTart": "Pop-Tart",
    "Water": "Agua",
    "FruitJuice": "Jugo de Fruta",
    "SportsDrink": "Bebida Isotónica",
    "Gum": "Chicle",
}

_CAMEL_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def icon_name_for(selection: Selection) -> str:
    """Retorna el nombre de recurso del icono de la seleccion."""
    return selection.value


def display_name_for(selection: Selection | str) -> str:
    """Retorna nombre visible usando traducciones conocidas o fallback."""
    raw_value = selection.value if isinstance(selection, Selection) else selection.strip()
    known_display_name = KNOWN_SELECTION_DISPLAY_NAMES.get(raw_value)
    if known_display_name is not None:
        return known_display_name

    return _CAMEL_CASE_BOUNDARY.sub(" ", raw_value)
