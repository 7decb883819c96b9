"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class DepositRequest:
    """Solicitud para depositar saldo en la maquina."""

    amount: float


@dataclass(slots=True)
class DepositResponse:
    """Respuesta con el saldo resultante tras el deposito."""

    amount_deposited: float


@dataclass(slots=True)
class VendRequest:
    """Solicitud de venta de una cantidad de una seleccion."""

    selection: str
    quantity: float = 1


@dataclass(slots=True)
class VendResponse:
    """Respuesta de una venta completada."""

    selection: str
    quantity: float
    total_price: float
    remaining_quantity: float
    amount_deposited: float


@dataclass(slots=True)
class InventoryEntry:
    """Estado de una seleccion del inventario."""

    selection: str
    price: float
    quantity: float


@dataclass(slots=True)
class InventorySnapshotRequest:
    """Solicitud del estado completo del inventario."""


@dataclass(slots=True)
class InventorySnapshotResponse:
    """Respuesta con inventario y saldo actual."""

    amount_deposited: float
    entries: list[InventoryEntry] = field(default_factory=list)
