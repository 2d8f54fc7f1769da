"""Client-side product cache, keyed by product id.

Filled incrementally from query responses so cart lines can be resolved
even after the product has dropped out of the current result page.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from storefront.domain.model.product import Product


class ProductCache(Mapping[str, Product]):
    """Append-only per key: merging never drops a previously seen id."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[str, Product] = {}
        self.merge(products)

    def merge(self, products: Iterable[Product]) -> None:
        for product in products:
            self._products[product.id] = product

    def __getitem__(self, product_id: str) -> Product:
        return self._products[product_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)
