"""Application service: Search Products use case (query)."""

from __future__ import annotations

from storefront.domain.model.criteria import FilterCriteria, QueryResult
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_query_service import CatalogQueryService
from storefront.infrastructure.logger import get_logger

logger = get_logger("search")


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._query_service = CatalogQueryService(product_repo)

    def handle(self, criteria: FilterCriteria | None = None) -> QueryResult:
        """Filter and sort the catalog. Never fails on odd criteria."""
        result = self._query_service.query(criteria)
        logger.debug("Search %s matched %d products", criteria, result.total)
        return result
