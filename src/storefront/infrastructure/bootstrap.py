"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from storefront.infrastructure.config import load_settings
from storefront.infrastructure.http.catalog_client import CatalogClient
from storefront.infrastructure.persistence.catalog_data import CATALOG
from storefront.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


@lru_cache(maxsize=1)
def product_repository() -> InMemoryProductRepository:
    """The catalog, built once per process and shared by every request."""
    return InMemoryProductRepository.from_records(CATALOG)


def catalog_client(base_url: str | None = None) -> CatalogClient:
    return CatalogClient(base_url or load_settings().api_base_url)
