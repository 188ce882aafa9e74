"""Options shared by every CLI command, carried on ``click.Context.obj``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from supermarket.application.product_service import ProductService
from supermarket.application.responses import Response
from supermarket.infrastructure.bootstrap import (
    product_repository,
    product_service,
    supplier_service,
)
from supermarket.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from supermarket.infrastructure.supplier.json_supplier_service import (
    JsonSupplierService,
)


@dataclass(frozen=True)
class CliContext:
    data_dir: Path | None
    max_order_quantity: int

    def product_service(self) -> ProductService:
        return product_service(self.data_dir, self.max_order_quantity)

    def product_repository(self) -> JsonProductRepository:
        return product_repository(self.data_dir)

    def supplier_service(self) -> JsonSupplierService:
        return supplier_service(self.data_dir)


def raise_for_response(response: Response) -> None:
    """Turn a non-OK response into a ClickException carrying its message."""
    if not response.is_ok:
        raise click.ClickException(
            f"{response.message} ({response.status.value})"
        )
