"""Cart aggregate, kept client-side in memory and discarded on reload.

The Cart maps product ids to positive quantities. ``set_quantity`` is the
single primitive behind increment, decrement and remove; it deletes the
entry instead of storing zero or a negative number.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """A cart entry resolved against a known product."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:

    def __init__(self) -> None:
        self._quantities: dict[str, int] = {}

    # --- Mutators -------------------------------------------------------------

    def add(self, product: Product) -> None:
        """Add one unit of *product*.

        No stock check happens here; gating on stock is the caller's job.
        """
        self.set_quantity(product.id, self.quantity_of(product.id) + 1)

    def set_quantity(self, product_id: str, qty: int) -> None:
        if qty <= 0:
            self._quantities.pop(product_id, None)
        else:
            self._quantities[product_id] = qty

    def increment(self, product_id: str) -> None:
        self.set_quantity(product_id, self.quantity_of(product_id) + 1)

    def decrement(self, product_id: str) -> None:
        self.set_quantity(product_id, self.quantity_of(product_id) - 1)

    def remove(self, product_id: str) -> None:
        self.set_quantity(product_id, 0)

    # --- Derivations ----------------------------------------------------------

    @property
    def quantities(self) -> Mapping[str, int]:
        return MappingProxyType(self._quantities)

    def quantity_of(self, product_id: str) -> int:
        return self._quantities.get(product_id, 0)

    @property
    def is_empty(self) -> bool:
        return not self._quantities

    @property
    def count(self) -> int:
        """Total units in the cart, including products not yet cached.

        This deliberately differs from ``total()``, which only sees
        entries that resolve against the product cache.
        """
        return sum(self._quantities.values())

    def line_items(self, products: Mapping[str, Product]) -> list[CartLine]:
        """Join quantities against *products*, dropping unknown ids."""
        return [
            CartLine(product=products[product_id], quantity=Quantity(qty))
            for product_id, qty in self._quantities.items()
            if product_id in products
        ]

    def total(self, products: Mapping[str, Product]) -> Money:
        total = Money.zero()
        for line in self.line_items(products):
            total = total + line.line_total
        return total
