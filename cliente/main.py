"""Punto de entrada CLI para ejecutar una sesion de la maquina expendedora."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from parametros import (
    DEFAULT_AMOUNT_DEPOSITED,
    DEFAULT_INVENTORY_RESOURCE,
    DEFAULT_INVENTORY_TYPE,
    RESOURCES_DIR,
)
from servidor.services.inventory_loader import build_vending_machine
from servidor.services.inventory_utils import format_amount, format_quantity
from shared.errors import InventoryError, ServiceError, ValidationError

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TRANSACTION_FAILED = 1
EXIT_INVENTORY_ERROR = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI de la sesion."""
    parser = argparse.ArgumentParser(
        description=(
            "Carga el inventario de la maquina expendedora y ejecuta depositos "
            "y ventas en el orden indicado."
        )
    )
    parser.add_argument(
        "--resource",
        default=DEFAULT_INVENTORY_RESOURCE,
        help="Nombre del recurso de inventario (sin extension).",
    )
    parser.add_argument(
        "--type",
        dest="resource_type",
        default=DEFAULT_INVENTORY_TYPE,
        help="Tipo del recurso: plist o json.",
    )
    parser.add_argument(
        "--resource-dir",
        type=Path,
        default=RESOURCES_DIR,
        help="Directorio donde buscar el recurso.",
    )
    parser.add_argument(
        "--initial-deposit",
        type=float,
        default=DEFAULT_AMOUNT_DEPOSITED,
        help="Saldo depositado al iniciar la sesion.",
    )
    parser.add_argument(
        "--deposit",
        dest="deposits",
        action="append",
        default=[],
        metavar="MONTO",
        help="Monto a depositar antes de las ventas. Puede repetirse.",
    )
    parser.add_argument(
        "--vend",
        dest="vends",
        action="append",
        default=[],
        metavar="SELECCION[:CANTIDAD]",
        help="Venta a ejecutar, por ejemplo Chips:2. Puede repetirse.",
    )
    return parser.parse_args(argv)


def split_vend_argument(raw_vend: str) -> tuple[str, str]:
    """Separa SELECCION[:CANTIDAD] en sus partes; la cantidad por defecto es 1."""
    selection, separator, quantity = raw_vend.partition(":")
    if not separator:
        return selection, "1"
    return selection, quantity


def run_session(
    resource: str = DEFAULT_INVENTORY_RESOURCE,
    resource_type: str = DEFAULT_INVENTORY_TYPE,
    resource_dir: Path = RESOURCES_DIR,
    initial_deposit: float = DEFAULT_AMOUNT_DEPOSITED,
    deposits: Sequence[str] = (),
    vends: Sequence[str] = (),
    out: TextIO | None = None,
) -> int:
    """Ejecuta una sesion completa y retorna el codigo de salida."""
    out = out or sys.stdout

    try:
        machine = build_vending_machine(
            resource=resource,
            resource_type=resource_type,
            resource_dir=resource_dir,
            amount_deposited=initial_deposit,
        )
    except (InventoryError, ValidationError):
        LOGGER.exception("No fue posible construir la maquina desde %s.", resource)
        return EXIT_INVENTORY_ERROR

    controller = AppController(gateway=LocalServerGateway(machine))
    failed = False

    for raw_amount in deposits:
        try:
            balance = controller.on_deposit(raw_amount)
        except (ServiceError, ValidationError) as exc:
            print(controller.describe_error(exc), file=out)
            failed = True
            continue
        print(f"Deposito aceptado. Saldo: {format_amount(balance)}.", file=out)

    for raw_vend in vends:
        selection, quantity = split_vend_argument(raw_vend)
        try:
            response = controller.on_vend(selection, quantity)
        except (ServiceError, ValidationError) as exc:
            print(controller.describe_error(exc), file=out)
            failed = True
            continue
        print(controller.describe_vend(response), file=out)

    _print_inventory(controller, out)
    return EXIT_TRANSACTION_FAILED if failed else EXIT_OK


def _print_inventory(controller: AppController, out: TextIO) -> None:
    """Imprime el inventario final y el saldo."""
    print("Inventario:", file=out)
    for _, display_name, price, quantity in controller.list_inventory():
        print(
            f"  {display_name}: {format_amount(price)} (quedan {format_quantity(quantity)})",
            file=out,
        )
    print(f"Saldo final: {format_amount(controller.current_balance())}", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Punto de entrada CLI."""
    args = parse_args(argv)
    return run_session(
        resource=args.resource,
        resource_type=args.resource_type,
        resource_dir=args.resource_dir,
        initial_deposit=args.initial_deposit,
        deposits=args.deposits,
        vends=args.vends,
    )


if __name__ == "__main__":
    raise SystemExit(main())
