"""Domain service: Catalog Query.

Derives a filtered, ordered view of the catalog from a FilterCriteria.
The stages run in a fixed order and each one is skipped when its
criterion is unset:

  1. category  - exact, case-sensitive match
  2. text      - case-insensitive substring of title or description
  3. min price - ``price >= min`` when the bound parses
  4. max price - ``price <= max`` when the bound parses
  5. sort      - price asc/desc or title asc; store order otherwise

The repository's sequence is never mutated; every stage builds a new list.
"""

from __future__ import annotations

import unicodedata
from typing import Callable

from storefront.domain.model.criteria import FilterCriteria, QueryResult, SortOrder
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import parse_price_bound
from storefront.domain.repository.product_repository import ProductRepository


def title_collation_key(title: str) -> tuple[str, str]:
    """Sort key approximating locale-aware comparison.

    Accents and case are ignored at the primary level ("Árbol" sorts
    next to "arbol"); the raw title breaks ties deterministically.
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), title


_SORT_KEYS: dict[SortOrder, tuple[Callable[[Product], object], bool]] = {
    SortOrder.PRICE_ASC: (lambda p: p.price.amount, False),
    SortOrder.PRICE_DESC: (lambda p: p.price.amount, True),
    SortOrder.TITLE_ASC: (lambda p: title_collation_key(p.title), False),
}


class CatalogQueryService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def query(self, criteria: FilterCriteria | None = None) -> QueryResult:
        criteria = criteria or FilterCriteria()
        result = list(self._product_repo.list_all())

        if criteria.category:
            result = [p for p in result if p.category == criteria.category]

        if criteria.q:
            term = criteria.q.lower()
            result = [
                p for p in result
                if term in p.title.lower() or term in p.description.lower()
            ]

        min_price = parse_price_bound(criteria.min_price)
        if min_price is not None:
            result = [p for p in result if p.price.amount >= min_price]

        max_price = parse_price_bound(criteria.max_price)
        if max_price is not None:
            result = [p for p in result if p.price.amount <= max_price]

        order = criteria.sort_order
        if order is not None:
            # sorted() stays stable with reverse=True
            key, reverse = _SORT_KEYS[order]
            result = sorted(result, key=key, reverse=reverse)

        return QueryResult.of(result)
