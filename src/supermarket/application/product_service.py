"""Application service: product catalog use cases.

Each public method handles one request and always returns a Response:

- business failures (invalid fields, unknown product, order too large,
  out of stock) flow through the Result pipeline and become
  ``bad_request`` with the first error encountered;
- infrastructure failures (commit, supplier) are exceptions and become
  ``internal_error``, either in ``_commit`` or in the ``error_boundary``
  wrapped around the request.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable

from supermarket.application.dto import ProductDefinition
from supermarket.application.responses import (
    Response,
    bad_request,
    internal_error,
    ok,
)
from supermarket.domain.constants import MAX_QUANTITY_IN_ORDER
from supermarket.domain.model.product import Product
from supermarket.domain.model.value_objects import (
    Email,
    ManufacturerName,
    ProductName,
    validate_quantity,
)
from supermarket.domain.repository.product_repository import ProductRepository
from supermarket.domain.result import (
    Result,
    and_then,
    combine,
    ensure,
    fold,
    map_result,
    pipe,
    success,
    to_result,
)
from supermarket.domain.service.supplier_service import SupplierService

logger = logging.getLogger(__name__)


def error_boundary(handler: Callable[..., Response]) -> Callable[..., Response]:
    """Convert any exception escaping a request handler into a 500 response."""

    @functools.wraps(handler)
    def wrapper(*args, **kwargs) -> Response:
        try:
            return handler(*args, **kwargs)
        except Exception as exc:
            logger.exception("Unhandled error in %s", handler.__name__)
            return internal_error(str(exc))

    return wrapper


def _not_found(product_id: int) -> str:
    return f"Product with id {product_id} was not found"


class ProductService:

    def __init__(
        self,
        repository: ProductRepository,
        supplier: SupplierService,
        max_quantity_in_order: int = MAX_QUANTITY_IN_ORDER,
    ) -> None:
        self._repository = repository
        self._supplier = supplier
        self._max_quantity_in_order = max_quantity_in_order

    # --- Use cases ------------------------------------------------------------

    @error_boundary
    def create_product(self, definition: ProductDefinition) -> Response:
        """Validate a definition, then stage and commit the new product."""
        validated = combine(
            ProductName.create(definition.name),
            ManufacturerName.create(definition.manufacturer),
            self._importer_email(definition),
            validate_quantity(definition.quantity),
        )

        def build(fields: tuple) -> Product:
            name, manufacturer, importer_email, quantity = fields
            return Product(
                product_id=definition.product_id,
                category=definition.category,
                name=name,
                manufacturer=manufacturer,
                importer_email=importer_email,
                quantity=quantity,
            )

        result = map_result(validated, build)
        result = and_then(result, self._repository.add)

        return fold(
            result,
            on_success=lambda _: self._commit(),
            on_failure=self._reject,
        )

    @error_boundary
    def get_product(self, product_id: int) -> Response:
        """Return the product as a ProductDefinition."""
        result = to_result(self._repository.find(product_id), _not_found(product_id))
        result = map_result(result, self._to_definition)

        return fold(result, on_success=ok, on_failure=self._reject)

    @error_boundary
    def order(self, product_id: int, quantity: int) -> Response:
        """Take *quantity* items of a product, restocking from the supplier if needed."""
        result = pipe(
            to_result(self._repository.find(product_id), _not_found(product_id)),
            lambda r: ensure(
                r, lambda _: quantity >= 0, "The order quantity should not be negative"
            ),
            lambda r: ensure(
                r,
                lambda _: quantity <= self._max_quantity_in_order,
                "The order is too large",
            ),
            lambda r: and_then(
                r,
                lambda p: self._order_from_supplier(p, quantity)
                if p.quantity < quantity
                else success(p),
            ),
            lambda r: map_result(r, lambda p: p.remove_stock(quantity)),
        )

        return fold(
            result,
            on_success=lambda _: self._commit(),
            on_failure=self._reject,
        )

    # --- Restock --------------------------------------------------------------

    def _order_from_supplier(self, product: Product, quantity: int) -> Result[Product]:
        """Top up stock so that *quantity* items can be taken.

        Supplier exceptions are not caught here; they reach the request's
        error boundary.  Stock is only changed once the delivery is known
        to cover the order.
        """
        excess = quantity - product.quantity
        logger.info(
            "Ordering %d of product %d from %s", excess, product.product_id, product.manufacturer
        )
        ordered = self._supplier.order(product.product_id, product.manufacturer, excess)

        result = ensure(
            success(ordered),
            lambda delivered: product.quantity + delivered >= quantity,
            "The product is out of stock",
        )
        result = map_result(result, product.add_stock)
        return map_result(result, lambda _: product)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _importer_email(definition: ProductDefinition) -> Result[Email | None]:
        # A missing email is valid and never reaches Email.create.
        if definition.importer_email is None:
            return success(None)
        return Email.create(definition.importer_email)

    @staticmethod
    def _to_definition(product: Product) -> ProductDefinition:
        return ProductDefinition(
            product_id=product.product_id,
            category=product.category,
            name=product.name.value,
            manufacturer=product.manufacturer.value,
            importer_email=(
                product.importer_email.value if product.importer_email is not None else None
            ),
            quantity=product.quantity,
        )

    @staticmethod
    def _reject(error: str) -> Response:
        logger.info("Request rejected: %s", error)
        return bad_request(error)

    def _commit(self) -> Response:
        try:
            self._repository.commit()
        except Exception as exc:
            logger.error("Commit failed: %s", exc)
            return internal_error(str(exc))
        return ok()
