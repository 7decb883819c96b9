"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
RESOURCES_DIR = DATA_DIR / "resources"
DEFAULT_INVENTORY_RESOURCE = "VendingInventory"
DEFAULT_INVENTORY_TYPE = "plist"
SUPPORTED_RESOURCE_TYPES: tuple[str, ...] = ("plist", "json")
DEFAULT_AMOUNT_DEPOSITED = 10.0

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
