"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is read-only, so there is no ``save``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> Sequence[Product]:
        """Return every product in catalog order."""
