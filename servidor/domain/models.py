"""Modelos de dominio de la maquina expendedora."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Selection(str, Enum):
    """Selecciones disponibles en la maquina. El valor es la clave del recurso."""

    SODA = "Soda"
    DIET_SODA = "DietSoda"
    CHIPS = "Chips"
    COOKIE = "Cookie"
    SANDWICH = "Sandwich"
    WRAP = "Wrap"
    CANDY_BAR = "CandyBar"
    POP_TART = "PopTart"
    WATER = "Water"
    FRUIT_JUICE = "FruitJuice"
    SPORTS_DRINK = "SportsDrink"
    GUM = "Gum"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class Item:
    """Representa un producto en inventario: precio fijo y cantidad restante."""

    price: float
    quantity: float


Inventory = dict[Selection, Item]
