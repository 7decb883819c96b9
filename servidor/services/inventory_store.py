"""Almacen de inventario: stock y precio por seleccion."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import replace

from servidor.domain.models import Inventory, Item, Selection
from servidor.services.inventory_utils import is_non_negative_number
from shared.errors import ValidationError

LOGGER = logging.getLogger(__name__)


class InventoryStore:
    """Mantiene el inventario de la maquina y responde consultas por seleccion.

    El almacen copia el mapeo recibido, por lo que referencias externas a los
    items originales no pueden alterar el stock. La unica mutacion posible es
    ``dispense``, que usa la maquina tras validar una venta.
    """

    def __init__(self, inventory: Mapping[Selection, Item]) -> None:
        self._items: Inventory = {}
        for selection, item in inventory.items():
            self._validate_entry(selection, item)
            self._items[selection] = replace(item)

        LOGGER.debug("Inventario cargado con %d selecciones.", len(self._items))

    def item_for(self, selection: object) -> Item | None:
        """Retorna una copia del item para la seleccion, o None si no existe."""
        item = self._items.get(selection)
        if item is None:
            return None
        return replace(item)

    def selections(self) -> list[Selection]:
        """Lista las selecciones presentes en orden de carga."""
        return list(self._items)

    def snapshot(self) -> Inventory:
        """Retorna una copia completa del inventario."""
        return {selection: replace(item) for selection, item in self._items.items()}

    def dispense(self, selection: Selection, quantity: float) -> Item:
        """Descuenta cantidad del item en sitio y retorna su estado actualizado."""
        item = self._items[selection]
        if quantity > item.quantity:
            raise ValidationError(
                f"No se puede descontar {quantity} de {selection}: stock {item.quantity}"
            )

        item.quantity -= quantity
        return replace(item)

    def __contains__(self, selection: object) -> bool:
        return selection in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Selection]:
        return iter(self._items)

    @staticmethod
    def _validate_entry(selection: object, item: object) -> None:
        """Valida una entrada del inventario inicial."""
        if not isinstance(selection, Selection):
            raise ValidationError(f"Clave de inventario invalida: {selection!r}")
        if not isinstance(item, Item):
            raise ValidationError(f"Item invalido para {selection}: {item!r}")
        if not is_non_negative_number(item.price):
            raise ValidationError(f"Precio invalido para {selection}: {item.price!r}")
        if not is_non_negative_number(item.quantity):
            raise ValidationError(f"Cantidad invalida para {selection}: {item.quantity!r}")
