"""Tests para InventoryStore."""

from __future__ import annotations

import unittest

from servidor.domain.models import Item, Selection
from servidor.services.inventory_store import InventoryStore
from shared.errors import ValidationError


class InventoryStoreTests(unittest.TestCase):
    """Valida consultas y validaciones del almacen de inventario."""

    def setUp(self) -> None:
        self.store = InventoryStore(
            {
                Selection.SODA: Item(price=1.5, quantity=5),
                Selection.CHIPS: Item(price=1.0, quantity=3),
            }
        )

    def test_item_for_present_selection(self) -> None:
        """Debe retornar el item de una seleccion cargada."""
        self.assertEqual(self.store.item_for(Selection.SODA), Item(price=1.5, quantity=5))

    def test_item_for_missing_selection_returns_none(self) -> None:
        """La ausencia no es un error: retorna None."""
        self.assertIsNone(self.store.item_for(Selection.GUM))
        self.assertIsNone(self.store.item_for("NoExiste"))

    def test_selections_preserve_order(self) -> None:
        """Debe listar selecciones en orden de carga."""
        self.assertEqual(self.store.selections(), [Selection.SODA, Selection.CHIPS])
        self.assertEqual(list(self.store), [Selection.SODA, Selection.CHIPS])
        self.assertEqual(len(self.store), 2)
        self.assertIn(Selection.CHIPS, self.store)
        self.assertNotIn(Selection.WATER, self.store)

    def test_dispense_updates_in_place(self) -> None:
        """dispense debe descontar stock de la seleccion indicada."""
        updated = self.store.dispense(Selection.CHIPS, 2)

        self.assertEqual(updated.quantity, 1)
        self.assertEqual(self.store.item_for(Selection.CHIPS).quantity, 1)
        self.assertEqual(self.store.item_for(Selection.SODA).quantity, 5)

    def test_dispense_never_goes_negative(self) -> None:
        """No debe permitir dejar una cantidad negativa."""
        with self.assertRaises(ValidationError):
            self.store.dispense(Selection.CHIPS, 4)

        self.assertEqual(self.store.item_for(Selection.CHIPS).quantity, 3)

    def test_snapshot_is_a_copy(self) -> None:
        """Modificar la foto no debe alterar el almacen."""
        snapshot = self.store.snapshot()
        snapshot[Selection.SODA].quantity = 0
        snapshot.pop(Selection.CHIPS)

        self.assertEqual(self.store.item_for(Selection.SODA).quantity, 5)
        self.assertIn(Selection.CHIPS, self.store)

    def test_rejects_invalid_entries(self) -> None:
        """Debe rechazar claves, precios o cantidades invalidas."""
        invalid_inventories = [
            {"Soda": Item(price=1.0, quantity=1)},
            {Selection.SODA: Item(price=-1.0, quantity=1)},
            {Selection.SODA: Item(price=1.0, quantity=-1)},
            {Selection.SODA: Item(price="1.0", quantity=1)},
            {Selection.SODA: Item(price=1.0, quantity=True)},
            {Selection.SODA: {"price": 1.0, "quantity": 1}},
        ]

        for inventory in invalid_inventories:
            with self.subTest(inventory=inventory):
                with self.assertRaises(ValidationError):
                    InventoryStore(inventory)

    def test_accepts_zero_price_and_quantity(self) -> None:
        """Precio y cantidad en cero son validos."""
        store = InventoryStore({Selection.GUM: Item(price=0, quantity=0)})
        self.assertEqual(store.item_for(Selection.GUM), Item(price=0, quantity=0))


if __name__ == "__main__":
    unittest.main()
