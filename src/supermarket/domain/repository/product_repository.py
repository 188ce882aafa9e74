"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The repository is a unit of work: ``add`` only stages
a product, and products returned by ``find`` are tracked so in-place
changes are written out by the next ``commit``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from supermarket.domain.model.product import Product
from supermarket.domain.result import Result


class ProductRepository(ABC):

    @abstractmethod
    def find(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Result[None]:
        """Stage a new product; fails if the ID is already taken."""

    @abstractmethod
    def commit(self) -> None:
        """Durably persist staged and modified products.

        Raises PersistenceError (or any other exception) when storage fails.
        Staged and modified products are discarded either way, so a failed
        commit is never written out by a later one.
        """
