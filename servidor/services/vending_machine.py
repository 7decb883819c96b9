"""Motor de transacciones de la maquina expendedora."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from threading import Lock

from parametros import DEFAULT_AMOUNT_DEPOSITED
from servidor.domain.models import Item, Selection
from servidor.services.inventory_store import InventoryStore
from servidor.services.inventory_utils import (
    compute_total_price,
    covers_amount,
    require_non_negative,
    require_positive,
)
from shared.errors import (
    InsufficientFundsError,
    InsufficientStockError,
    InvalidSelectionError,
    OutOfStockError,
)

LOGGER = logging.getLogger(__name__)


class VendingMachine:
    """Administra saldo depositado e inventario, y ejecuta ventas."""

    SELECTION: tuple[Selection, ...] = tuple(Selection)

    def __init__(
        self,
        inventory: Mapping[Selection, Item],
        amount_deposited: float = DEFAULT_AMOUNT_DEPOSITED,
    ) -> None:
        self._inventory = InventoryStore(inventory)
        self._amount_deposited = require_non_negative(amount_deposited, "amount_deposited")
        self._lock = Lock()

    @property
    def inventory(self) -> InventoryStore:
        return self._inventory

    @property
    def amount_deposited(self) -> float:
        return self._amount_deposited

    def item_for_current_selection(self, selection: object) -> Item | None:
        """Retorna el item de la seleccion o None si no esta en inventario."""
        return self._inventory.item_for(selection)

    def deposit(self, amount: float) -> float:
        """Suma el monto al saldo depositado y retorna el nuevo saldo."""
        require_non_negative(amount, "amount")

        with self._lock:
            self._amount_deposited += amount
            balance = self._amount_deposited

        LOGGER.info("Deposito registrado: monto=%s, saldo=%s", amount, balance)
        return balance

    def vend(self, selection: object, quantity: float) -> None:
        """Vende una cantidad de la seleccion descontando stock y saldo.

        Todas las validaciones ocurren antes de mutar estado: si la venta
        falla, inventario y saldo quedan intactos. Seleccion y stock se
        revisan antes que la cantidad solicitada.

        Raises:
            InvalidSelectionError: si la seleccion no esta en inventario.
            OutOfStockError: si la seleccion no tiene stock.
            ValidationError: si la cantidad no es un numero mayor a 0.
            InsufficientStockError: si el stock no alcanza para la cantidad.
            InsufficientFundsError: si el saldo no cubre el precio total.
        """
        with self._lock:
            item = self._inventory.item_for(selection)
            if item is None:
                LOGGER.warning("Venta rechazada, seleccion invalida: %s", selection)
                raise InvalidSelectionError(selection)

            if not item.quantity > 0:
                LOGGER.warning("Venta rechazada, seleccion agotada: %s", selection)
                raise OutOfStockError(selection)

            require_positive(quantity, "quantity")

            if quantity > item.quantity:
                LOGGER.warning(
                    "Venta rechazada, stock insuficiente: %s (disponible=%s, solicitado=%s)",
                    selection,
                    item.quantity,
                    quantity,
                )
                raise InsufficientStockError(selection, item.quantity, quantity)

            total_price = compute_total_price(item.price, quantity)
            if not covers_amount(self._amount_deposited, total_price):
                required = total_price - self._amount_deposited
                LOGGER.warning(
                    "Venta rechazada, saldo insuficiente: %s (faltan %s)",
                    selection,
                    required,
                )
                raise InsufficientFundsError(required=required)

            updated = self._inventory.dispense(selection, quantity)
            self._amount_deposited = max(0.0, self._amount_deposited - total_price)
            balance = self._amount_deposited

        LOGGER.info(
            "Venta completada: seleccion=%s, cantidad=%s, total=%s, stock=%s, saldo=%s",
            selection,
            quantity,
            total_price,
            updated.quantity,
            balance,
        )
