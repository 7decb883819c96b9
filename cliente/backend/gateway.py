"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from servidor.domain.models import Selection
from servidor.services.inventory_utils import compute_total_price
from servidor.services.vending_machine import VendingMachine
from shared.errors import InvalidSelectionError, ServiceError, ValidationError
from shared.protocol import (
    DepositRequest,
    DepositResponse,
    InventoryEntry,
    InventorySnapshotRequest,
    InventorySnapshotResponse,
    VendRequest,
    VendResponse,
)

LOGGER = logging.getLogger(__name__)


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def deposit(self, request: DepositRequest) -> DepositResponse:
        """Solicita deposito de saldo."""

    def vend(self, request: VendRequest) -> VendResponse:
        """Solicita venta de una seleccion."""

    def get_inventory(self, request: InventorySnapshotRequest) -> InventorySnapshotResponse:
        """Solicita el estado del inventario y saldo."""


class LocalServerGateway:
    """Implementacion local del gateway usando una maquina en memoria."""

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def deposit(self, request: DepositRequest) -> DepositResponse:
        """Deposita saldo delegando en la maquina."""
        try:
            balance = self._machine.deposit(request.amount)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al depositar saldo.")
            raise ServiceError("No fue posible registrar el deposito.") from exc

        return DepositResponse(amount_deposited=balance)

    def vend(self, request: VendRequest) -> VendResponse:
        """Ejecuta una venta y retorna el detalle resultante."""
        selection = self._resolve_selection(request.selection)
        try:
            self._machine.vend(selection, request.quantity)
            item = self._machine.item_for_current_selection(selection)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al vender %s.", request.selection)
            raise ServiceError("No fue posible completar la venta.") from exc

        return VendResponse(
            selection=selection.value,
            quantity=request.quantity,
            total_price=compute_total_price(item.price, request.quantity),
            remaining_quantity=item.quantity,
            amount_deposited=self._machine.amount_deposited,
        )

    def get_inventory(self, request: InventorySnapshotRequest) -> InventorySnapshotResponse:
        """Retorna una foto del inventario y del saldo actual."""
        snapshot = self._machine.inventory.snapshot()
        entries = [
            InventoryEntry(selection=selection.value, price=item.price, quantity=item.quantity)
            for selection, item in snapshot.items()
        ]
        return InventorySnapshotResponse(
            amount_deposited=self._machine.amount_deposited,
            entries=entries,
        )

    @staticmethod
    def _resolve_selection(raw_selection: str) -> Selection:
        """Convierte el nombre recibido en Selection o rechaza la venta."""
        try:
            return Selection(raw_selection)
        except ValueError:
            LOGGER.warning("Venta rechazada, seleccion desconocida: %s", raw_selection)
            raise InvalidSelectionError(raw_selection) from None
