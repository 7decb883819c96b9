"""Controlador principal del cliente."""

from __future__ import annotations

import logging

from servidor.services.inventory_utils import format_amount, format_quantity
from shared.errors import (
    InsufficientFundsError,
    InsufficientStockError,
    InvalidSelectionError,
    OutOfStockError,
    ServiceError,
    ValidationError,
)
from shared.protocol import (
    DepositRequest,
    InventorySnapshotRequest,
    VendRequest,
    VendResponse,
)

from .gateway import ServerGateway
from .selection_names import display_name_for
from .validators import normalize_selection_name, parse_amount, parse_quantity

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones del usuario con la maquina expendedora."""

    def __init__(self, gateway: ServerGateway) -> None:
        self._gateway = gateway

    def on_deposit(self, raw_amount: str | float) -> float:
        """Valida y deposita un monto; retorna el saldo resultante."""
        amount = parse_amount(raw_amount)
        response = self._gateway.deposit(DepositRequest(amount=amount))
        LOGGER.info("Accion ejecutada: deposito de %s", format_amount(amount))
        return response.amount_deposited

    def on_vend(self, raw_selection: str, raw_quantity: str | float = 1) -> VendResponse:
        """Valida entrada y solicita la venta al servidor."""
        selection = normalize_selection_name(raw_selection)
        quantity = parse_quantity(raw_quantity)
        response = self._gateway.vend(VendRequest(selection=selection, quantity=quantity))
        LOGGER.info(
            "Accion ejecutada: venta de %s x%s",
            response.selection,
            format_quantity(response.quantity),
        )
        return response

    def list_inventory(self) -> list[tuple[str, str, float, float]]:
        """Lista inventario como tuplas (seleccion, nombre visible, precio, cantidad)."""
        response = self._gateway.get_inventory(InventorySnapshotRequest())
        return [
            (entry.selection, display_name_for(entry.selection), entry.price, entry.quantity)
            for entry in response.entries
        ]

    def current_balance(self) -> float:
        """Retorna el saldo depositado actual."""
        return self._gateway.get_inventory(InventorySnapshotRequest()).amount_deposited

    @staticmethod
    def describe_vend(response: VendResponse) -> str:
        """Construye mensaje de confirmacion de una venta."""
        return (
            f"Vendido: {display_name_for(response.selection)} "
            f"x{format_quantity(response.quantity)} por {format_amount(response.total_price)}. "
            f"Saldo: {format_amount(response.amount_deposited)}."
        )

    @staticmethod
    def describe_error(exc: Exception) -> str:
        """Traduce un error de negocio a mensaje para el usuario."""
        if isinstance(exc, InvalidSelectionError):
            return f"Seleccion no disponible: {exc.selection}."
        if isinstance(exc, InsufficientStockError):
            return (
                f"Stock insuficiente para {display_name_for(str(exc.selection))}: "
                f"quedan {format_quantity(exc.available)}."
            )
        if isinstance(exc, OutOfStockError):
            return f"{display_name_for(str(exc.selection))} esta agotado."
        if isinstance(exc, InsufficientFundsError):
            return f"Saldo insuficiente. Deposita {format_amount(exc.required)} adicionales."
        if isinstance(exc, (ValidationError, ServiceError)):
            return str(exc)
        return "Ocurrio un error inesperado."
