"""Catalog query criteria and results.

Criteria arrive as raw strings from the query string and are interpreted
by the CatalogQueryService; nothing here rejects a value.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Iterable, Mapping

from storefront.domain.model.product import Product


class SortOrder(Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    TITLE_ASC = "title_asc"

    @classmethod
    def parse(cls, raw: str | None) -> SortOrder | None:
        """Return the matching order, or None for unset/unknown values."""
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


# Python attribute -> query-string parameter
WIRE_NAMES = {
    "category": "category",
    "q": "q",
    "min_price": "minPrice",
    "max_price": "maxPrice",
    "sort": "sort",
}


@dataclass(frozen=True)
class FilterCriteria:
    """Optional filter/sort parameters for one catalog query."""

    category: str | None = None
    q: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    sort: str | None = None

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> FilterCriteria:
        """Build criteria from wire-named parameters, ignoring unknown keys."""
        values = {}
        for attr, wire in WIRE_NAMES.items():
            value = params.get(wire)
            values[attr] = None if value is None else str(value)
        return cls(**values)

    def to_query_params(self) -> dict[str, str]:
        """Wire-named parameters with empty/None fields left out entirely."""
        params: dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "":
                continue
            params[WIRE_NAMES[f.name]] = str(value)
        return params

    @property
    def sort_order(self) -> SortOrder | None:
        return SortOrder.parse(self.sort)


@dataclass(frozen=True)
class QueryResult:
    """Ordered products matching a query. ``total`` is always ``len(items)``."""

    items: tuple[Product, ...]
    total: int

    def __post_init__(self) -> None:
        if self.total != len(self.items):
            raise ValueError(
                f"QueryResult total {self.total} does not match {len(self.items)} items"
            )

    @classmethod
    def of(cls, items: Iterable[Product]) -> QueryResult:
        items = tuple(items)
        return cls(items=items, total=len(items))

    @classmethod
    def empty(cls) -> QueryResult:
        return cls(items=(), total=0)
