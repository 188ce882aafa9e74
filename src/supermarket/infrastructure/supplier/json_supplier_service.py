"""JSON-file-backed implementation of SupplierService.

The file maps each manufacturer to the units it can still deliver.
A restock request is served from that stock, possibly only in part, and
the remaining supplier stock is written back immediately: the supplier
is an external system and does not take part in our commit.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from supermarket.domain.exceptions import SupplierError
from supermarket.domain.model.value_objects import ManufacturerName
from supermarket.domain.service.supplier_service import SupplierService

logger = logging.getLogger(__name__)


class JsonSupplierService(SupplierService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SupplierService interface --------------------------------------------

    def order(
        self, product_id: int, manufacturer: ManufacturerName, excess_quantity: int
    ) -> int:
        """Deliver up to *excess_quantity* units from the manufacturer's stock.

        Delivered units leave the supplier stock for good, even when the
        delivery is too small and the order it was meant for is rejected
        as out of stock.
        """
        stock = self._load()
        if manufacturer.value not in stock:
            raise SupplierError(f"Unknown supplier '{manufacturer}'")

        available = stock[manufacturer.value]
        delivered = min(available, excess_quantity)
        stock[manufacturer.value] = available - delivered
        self._persist(stock)

        logger.info(
            "Supplier %s delivered %d of %d requested for product %d",
            manufacturer, delivered, excess_quantity, product_id,
        )
        return delivered

    # --- Supplier stock management --------------------------------------------

    def set_stock(self, manufacturer: str, quantity: int) -> None:
        """Record how many units *manufacturer* can deliver."""
        if quantity < 0:
            raise SupplierError("Supplier stock cannot be negative")
        stock = self._load()
        stock[manufacturer] = quantity
        self._persist(stock)

    def stock_of(self, manufacturer: str) -> int | None:
        return self._load().get(manufacturer)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, int]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SupplierError(f"Supplier unavailable: {exc}") from exc

    def _persist(self, stock: dict[str, int]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(stock, indent=2, sort_keys=True) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise SupplierError(f"Supplier unavailable: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
