"""Product aggregate.

A product is the unit of consistency for an order: its stock level is
read, topped up from the supplier and decremented within one request,
then committed as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass

from supermarket.domain.exceptions import ValidationError
from supermarket.domain.model.value_objects import Email, ManufacturerName, ProductName


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``name`` and ``manufacturer`` are always valid value objects
    - ``importer_email``, when present, is a syntactically valid address
    - ``quantity`` is never negative
    """

    product_id: int
    category: str
    name: ProductName
    manufacturer: ManufacturerName
    importer_email: Email | None
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError(
                f"Product quantity cannot be negative, got {self.quantity}"
            )

    def add_stock(self, quantity: int) -> None:
        """Record stock delivered by the supplier."""
        if quantity < 0:
            raise ValidationError("Added stock cannot be negative")
        self.quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """Take ordered items out of stock."""
        if quantity < 0:
            raise ValidationError("Removed stock cannot be negative")
        if quantity > self.quantity:
            raise ValidationError(
                f"Cannot remove {quantity} of {self.name} "
                f"(only {self.quantity} in stock)"
            )
        self.quantity -= quantity
