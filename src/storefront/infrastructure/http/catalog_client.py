"""
Catalog HTTP client: storefront client -> catalog API.

Every call takes an optional CancellationToken. A cancelled call resolves
to an empty result (or None for a single product) instead of raising, so
callers superseding a request never see an error for it. Transport
failures, non-success statuses and malformed response bodies raise
CatalogUnavailableError.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, TypeVar

import httpx

from storefront.domain.exceptions import CatalogUnavailableError, ValidationError
from storefront.domain.model.criteria import FilterCriteria, QueryResult
from storefront.domain.model.product import Product
from storefront.infrastructure.http.cancellation import CancellationToken, RequestCancelled
from storefront.infrastructure.logger import get_logger

logger = get_logger("client")

T = TypeVar("T")


def build_query(params: Mapping[str, Any] | None = None) -> dict[str, str]:
    """Drop None and empty-string values; stringify the rest."""
    return {
        key: str(value)
        for key, value in (params or {}).items()
        if value is not None and value != ""
    }


class CatalogClient:

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(transport=transport)

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # --- Catalog operations ---------------------------------------------------

    async def fetch_products(
        self,
        criteria: FilterCriteria | Mapping[str, Any] | None = None,
        token: CancellationToken | None = None,
    ) -> QueryResult:
        """Fetch the products matching *criteria*.

        Accepts FilterCriteria or a plain mapping of wire-named params.
        """
        if isinstance(criteria, FilterCriteria):
            params = criteria.to_query_params()
        else:
            params = build_query(criteria)

        try:
            data = await self._get_json("/products", params=params, token=token)
        except RequestCancelled:
            logger.debug("fetch_products cancelled (params=%s)", params)
            return QueryResult.empty()

        return self._parse(
            "/products", lambda: QueryResult.of(Product.from_dict(item) for item in data["items"])
        )

    async def fetch_product_by_id(
        self, product_id: str, token: CancellationToken | None = None
    ) -> Product | None:
        try:
            data = await self._get_json(
                f"/products/{product_id}", token=token, allow_not_found=True
            )
        except RequestCancelled:
            logger.debug("fetch_product_by_id cancelled (id=%s)", product_id)
            return None

        if data is None:
            return None
        return self._parse(f"/products/{product_id}", lambda: Product.from_dict(data))

    async def health(self) -> bool:
        try:
            data = await self._get_json("/health")
        except CatalogUnavailableError:
            return False
        return isinstance(data, dict) and data.get("status") == "ok"

    # --- Internal helpers -----------------------------------------------------

    async def _get_json(
        self,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        token: CancellationToken | None = None,
        allow_not_found: bool = False,
    ) -> Any:
        url = f"{self._base_url}{path}"
        request = self._client.get(url, params=params)
        try:
            if token is None:
                resp = await request
            else:
                resp = await token.run(request)
        except httpx.RequestError as e:
            logger.error("catalog_client: GET %s failed: %s", url, e)
            raise CatalogUnavailableError(f"Catalog request to {url} failed: {e}") from e

        if allow_not_found and resp.status_code == 404:
            return None
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "catalog_client: GET %s HTTP %s body=%s",
                url, e.response.status_code, e.response.text[:500],
            )
            raise CatalogUnavailableError(
                f"Request failed with status {e.response.status_code}"
            ) from e
        try:
            return resp.json()
        except ValueError as e:
            logger.error("catalog_client: GET %s returned invalid JSON: %s", url, e)
            raise CatalogUnavailableError(f"Catalog response from {url} is not JSON") from e

    @staticmethod
    def _parse(path: str, build: Callable[[], T]) -> T:
        """Run *build* over a decoded payload, mapping a malformed shape to
        CatalogUnavailableError."""
        try:
            return build()
        except (ValidationError, KeyError, TypeError, AttributeError) as e:
            logger.error("catalog_client: malformed payload from %s: %r", path, e)
            raise CatalogUnavailableError(f"Malformed catalog response from {path}") from e
