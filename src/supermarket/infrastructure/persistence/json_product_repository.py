"""JSON-file-backed implementation of ProductRepository.

Nothing is written until ``commit``: added products are staged, and
products handed out by ``find`` are tracked together with a snapshot of
their stored state.  ``commit`` writes staged products and the tracked
ones that changed since they were loaded, then forgets all of them,
whether the write succeeded or not, so one request can never leak
changes into the next.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from supermarket.domain.exceptions import PersistenceError
from supermarket.domain.model.product import Product
from supermarket.domain.model.value_objects import Email, ManufacturerName, ProductName
from supermarket.domain.repository.product_repository import ProductRepository
from supermarket.domain.result import Result, failure, success

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        # product_id -> (product handed out, its serialized state at load time)
        self._tracked: dict[int, tuple[Product, dict]] = {}
        self._staged: dict[int, Product] = {}
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find(self, product_id: int) -> Product | None:
        if product_id in self._staged:
            return self._staged[product_id]
        modified = self._modified()
        if product_id in modified:
            return modified[product_id]
        for raw in self._load_raw():
            if raw["product_id"] == product_id:
                product = self._to_domain(raw)
                self._tracked[product_id] = (product, self._to_raw(product))
                return product
        self._tracked.pop(product_id, None)
        return None

    def list_all(self) -> list[Product]:
        products = {raw["product_id"]: self._to_domain(raw) for raw in self._load_raw()}
        products.update(self._modified())
        products.update(self._staged)
        return list(products.values())

    def add(self, product: Product) -> Result[None]:
        if self.find(product.product_id) is not None:
            return failure(f"Product with id {product.product_id} already exists")
        self._staged[product.product_id] = product
        return success()

    def commit(self) -> None:
        try:
            pending = {**self._modified(), **self._staged}
            if not pending:
                return

            records = self._load_raw()
            count = len(pending)
            for i, raw in enumerate(records):
                product = pending.pop(raw["product_id"], None)
                if product is not None:
                    records[i] = self._to_raw(product)
            records.extend(self._to_raw(p) for p in pending.values())

            self._persist_raw(records)
            logger.debug("Committed %d product(s) to %s", count, self._file_path)
        finally:
            self._tracked.clear()
            self._staged.clear()

    # --- Change tracking ------------------------------------------------------

    def _modified(self) -> dict[int, Product]:
        """Tracked products whose state differs from what was loaded."""
        return {
            product_id: product
            for product_id, (product, snapshot) in self._tracked.items()
            if self._to_raw(product) != snapshot
        }

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "product_id": product.product_id,
            "category": product.category,
            "name": product.name.value,
            "manufacturer": product.manufacturer.value,
            "importer_email": (
                product.importer_email.value if product.importer_email is not None else None
            ),
            "quantity": product.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        # Stored records were validated on the way in; rebuild without re-validating.
        email = raw.get("importer_email")
        return Product(
            product_id=raw["product_id"],
            category=raw["category"],
            name=ProductName(raw["name"]),
            manufacturer=ManufacturerName(raw["manufacturer"]),
            importer_email=Email(email) if email is not None else None,
            quantity=raw["quantity"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
