"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry raw, unvalidated data between the transport and application
layers without exposing domain value objects to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDefinition:
    """A product as supplied by, and returned to, the caller."""

    product_id: int
    category: str
    name: str
    manufacturer: str
    importer_email: str | None
    quantity: int
