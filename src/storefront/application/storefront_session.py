"""Application service: Storefront Session.

Holds the client-side state a storefront page works from: the current
filters and their results, a product cache, and the cart. Filter changes
go through ``apply_filters``, which supersedes any request still in
flight so a slow, stale response can never overwrite fresher results.
"""

from __future__ import annotations

from dataclasses import replace

from storefront.domain.exceptions import CatalogUnavailableError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.criteria import FilterCriteria
from storefront.domain.model.product import Product
from storefront.domain.model.product_cache import ProductCache
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.http.cancellation import CancellationToken
from storefront.infrastructure.http.catalog_client import CatalogClient
from storefront.infrastructure.logger import get_logger

logger = get_logger("session")

CATALOG_UNAVAILABLE_MESSAGE = (
    "The catalog is unavailable right now. Is the server running on port 4000?"
)


class StorefrontSession:

    def __init__(self, client: CatalogClient) -> None:
        self._client = client
        self._pending: CancellationToken | None = None

        self.filters = FilterCriteria()
        self.items: tuple[Product, ...] = ()
        self.total = 0
        self.loading = False
        self.error: str | None = None

        self.products = ProductCache()
        self.cart = Cart()

    # --- Catalog --------------------------------------------------------------

    async def apply_filters(self, **changes: str | None) -> None:
        """Update the filters and load matching products.

        Keyword names are FilterCriteria fields (``category``, ``q``,
        ``min_price``, ``max_price``, ``sort``).
        """
        self.filters = replace(self.filters, **changes)
        await self._load()

    async def refresh(self) -> None:
        await self._load()

    async def load_product(self, product_id: str) -> Product | None:
        """Fetch one product and make it known to the cart."""
        try:
            product = await self._client.fetch_product_by_id(product_id)
        except CatalogUnavailableError:
            self.error = CATALOG_UNAVAILABLE_MESSAGE
            return None
        if product is not None:
            self.products.merge([product])
        return product

    async def _load(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
        token = CancellationToken()
        self._pending = token

        self.loading = True
        self.error = None
        try:
            result = await self._client.fetch_products(self.filters, token)
        except CatalogUnavailableError:
            if token is self._pending:
                self.error = CATALOG_UNAVAILABLE_MESSAGE
                self.loading = False
                self._pending = None
            return

        if token.cancelled or token is not self._pending:
            return

        self.items = result.items
        self.total = result.total
        self.products.merge(result.items)
        self.loading = False
        self._pending = None

    # --- Cart -----------------------------------------------------------------

    @staticmethod
    def can_add_to_cart(product: Product) -> bool:
        return product.is_available

    def add_to_cart(self, product: Product) -> bool:
        if not self.can_add_to_cart(product):
            return False
        self.cart.add(product)
        return True

    def increment(self, product_id: str) -> None:
        self.cart.increment(product_id)

    def decrement(self, product_id: str) -> None:
        self.cart.decrement(product_id)

    def remove(self, product_id: str) -> None:
        self.cart.remove(product_id)

    def set_quantity(self, product_id: str, qty: int) -> None:
        self.cart.set_quantity(product_id, qty)

    @property
    def cart_count(self) -> int:
        return self.cart.count

    @property
    def cart_lines(self) -> list[CartLine]:
        return self.cart.line_items(self.products)

    @property
    def cart_total(self) -> Money:
        return self.cart.total(self.products)

    @property
    def can_checkout(self) -> bool:
        return not self.cart.is_empty

    def checkout(self) -> bool:
        """Checkout is not offered yet; this never places an order."""
        logger.info("Checkout requested with %d items; not available", self.cart_count)
        return False
