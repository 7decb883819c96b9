"""Carga del inventario inicial desde recursos plist o JSON."""

from __future__ import annotations

import json
import logging
import plistlib
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from parametros import (
    DEFAULT_AMOUNT_DEPOSITED,
    DEFAULT_INVENTORY_RESOURCE,
    DEFAULT_INVENTORY_TYPE,
    RESOURCES_DIR,
    SUPPORTED_RESOURCE_TYPES,
)
from servidor.domain.models import Inventory, Item, Selection
from servidor.services.inventory_utils import is_non_negative_number
from servidor.services.vending_machine import VendingMachine
from shared.errors import ConversionError, InvalidKeyError, InvalidResourceError

LOGGER = logging.getLogger(__name__)

PRICE_KEY = "price"
QUANTITY_KEY = "quantity"


def resource_path(resource: str, resource_type: str, resource_dir: Path = RESOURCES_DIR) -> Path:
    """Construye la ruta del recurso a partir de nombre y tipo."""
    return resource_dir / f"{resource.strip()}.{resource_type.strip().lstrip('.')}"


def dictionary_from_file(
    resource: str,
    resource_type: str,
    resource_dir: Path = RESOURCES_DIR,
) -> dict[str, Any]:
    """Lee un recurso plist/JSON y retorna su diccionario de nivel superior."""
    path = resource_path(resource, resource_type, resource_dir)
    if not path.is_file():
        raise InvalidResourceError(f"No existe el recurso de inventario: {path}")

    normalized_type = path.suffix.lstrip(".").lower()
    if normalized_type not in SUPPORTED_RESOURCE_TYPES:
        raise ConversionError(
            f"Tipo de recurso no soportado: {resource_type}. "
            f"Usa uno de: {', '.join(SUPPORTED_RESOURCE_TYPES)}."
        )

    try:
        with path.open("rb") as resource_file:
            if normalized_type == "plist":
                data = plistlib.load(resource_file)
            else:
                data = json.load(resource_file)
    except OSError as exc:
        raise ConversionError(f"No fue posible leer el recurso de inventario: {path}") from exc
    except (ValueError, ExpatError) as exc:
        raise ConversionError(f"Contenido invalido en recurso de inventario: {path}") from exc

    if not isinstance(data, dict) or not all(isinstance(key, str) for key in data):
        raise ConversionError(
            f"El recurso de inventario debe ser un diccionario con claves de texto: {path}"
        )

    LOGGER.debug("Recurso de inventario leido: %s (%d entradas)", path, len(data))
    return data


def vending_inventory_from_dictionary(dictionary: Mapping[str, Any]) -> Inventory:
    """Convierte un diccionario crudo en inventario Selection -> Item."""
    inventory: Inventory = {}

    for key, value in dictionary.items():
        try:
            selection = Selection(key)
        except ValueError:
            raise InvalidKeyError(key) from None

        inventory[selection] = _item_from_value(key, value)

    return inventory


def load_inventory(
    resource: str = DEFAULT_INVENTORY_RESOURCE,
    resource_type: str = DEFAULT_INVENTORY_TYPE,
    resource_dir: Path = RESOURCES_DIR,
) -> Inventory:
    """Lee el recurso indicado y construye el inventario completo."""
    dictionary = dictionary_from_file(resource, resource_type, resource_dir)
    inventory = vending_inventory_from_dictionary(dictionary)
    LOGGER.info(
        "Inventario cargado desde %s: %d selecciones",
        resource_path(resource, resource_type, resource_dir),
        len(inventory),
    )
    return inventory


def build_vending_machine(
    resource: str = DEFAULT_INVENTORY_RESOURCE,
    resource_type: str = DEFAULT_INVENTORY_TYPE,
    resource_dir: Path = RESOURCES_DIR,
    amount_deposited: float = DEFAULT_AMOUNT_DEPOSITED,
) -> VendingMachine:
    """Construye una maquina con el inventario del recurso indicado."""
    inventory = load_inventory(resource, resource_type, resource_dir)
    return VendingMachine(inventory, amount_deposited=amount_deposited)


def _item_from_value(key: str, value: Any) -> Item:
    """Valida y convierte el valor crudo de una entrada en Item."""
    if not isinstance(value, Mapping):
        raise ConversionError(f"La entrada {key!r} debe ser un diccionario con price y quantity.")

    price = value.get(PRICE_KEY)
    quantity = value.get(QUANTITY_KEY)
    if not is_non_negative_number(price):
        raise ConversionError(f"Precio invalido para {key!r}: {price!r}")
    if not is_non_negative_number(quantity):
        raise ConversionError(f"Cantidad invalida para {key!r}: {quantity!r}")

    return Item(price=price, quantity=quantity)
