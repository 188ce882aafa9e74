"""Abstract gateway to the external supplier that restocks products."""

from __future__ import annotations

from abc import ABC, abstractmethod

from supermarket.domain.model.value_objects import ManufacturerName


class SupplierService(ABC):

    @abstractmethod
    def order(
        self, product_id: int, manufacturer: ManufacturerName, excess_quantity: int
    ) -> int:
        """Request *excess_quantity* more units of a product.

        Returns the quantity actually supplied, which may be less than
        requested when the supplier itself runs short.  Infrastructure
        failures are raised (typically as SupplierError), never returned.
        """
