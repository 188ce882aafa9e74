"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from supermarket.application.product_service import ProductService
from supermarket.domain.constants import MAX_QUANTITY_IN_ORDER
from supermarket.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from supermarket.infrastructure.supplier.json_supplier_service import (
    JsonSupplierService,
)

DATA_DIR_ENV = "SUPERMARKET_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository(directory: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository((directory or data_dir()) / "products.json")


def supplier_service(directory: Path | None = None) -> JsonSupplierService:
    return JsonSupplierService((directory or data_dir()) / "suppliers.json")


def product_service(
    directory: Path | None = None,
    max_quantity_in_order: int = MAX_QUANTITY_IN_ORDER,
) -> ProductService:
    return ProductService(
        repository=product_repository(directory),
        supplier=supplier_service(directory),
        max_quantity_in_order=max_quantity_in_order,
    )
