"""Read-only, in-memory implementation of ProductRepository."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """Holds the catalog as an immutable tuple built once at construction."""

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[str, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValidationError(f"Duplicate product id '{product.id}'")
            self._by_id[product.id] = product

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> InMemoryProductRepository:
        return cls(Product.from_dict(record) for record in records)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def list_all(self) -> tuple[Product, ...]:
        return self._products
