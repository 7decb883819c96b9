"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class InventoryError(ServiceError):
    """Error al construir el inventario desde un recurso."""


class InvalidResourceError(InventoryError):
    """El recurso de inventario solicitado no existe."""


class ConversionError(InventoryError):
    """El contenido del recurso no tiene la estructura esperada."""


class InvalidKeyError(InventoryError):
    """Una clave del recurso no corresponde a ninguna seleccion conocida."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Seleccion desconocida en inventario: {key!r}")
        self.key = key


class VendingMachineError(ServiceError):
    """Error de una transaccion de la maquina expendedora."""


class InvalidSelectionError(VendingMachineError):
    """La seleccion solicitada no esta en el inventario."""

    def __init__(self, selection: object) -> None:
        super().__init__(f"Seleccion invalida: {selection}")
        self.selection = selection


class OutOfStockError(VendingMachineError):
    """La seleccion no tiene stock disponible."""

    def __init__(self, selection: object, message: str | None = None) -> None:
        super().__init__(message or f"Seleccion agotada: {selection}")
        self.selection = selection


class InsufficientStockError(OutOfStockError):
    """El stock disponible no alcanza para la cantidad solicitada."""

    def __init__(self, selection: object, available: float, requested: float) -> None:
        super().__init__(
            selection,
            f"Stock insuficiente para {selection}: "
            f"disponible={available}, solicitado={requested}",
        )
        self.available = available
        self.requested = requested


class InsufficientFundsError(VendingMachineError):
    """El saldo depositado no cubre el precio total."""

    def __init__(self, required: float) -> None:
        super().__init__(f"Saldo insuficiente. Faltan {required}")
        self.required = required
