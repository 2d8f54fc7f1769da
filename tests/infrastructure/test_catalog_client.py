"""Tests for the httpx-based CatalogClient and CancellationToken."""

import asyncio

import httpx
import pytest

from storefront.domain.exceptions import CatalogUnavailableError
from storefront.domain.model.criteria import FilterCriteria, QueryResult
from storefront.infrastructure.api.app import create_app
from storefront.infrastructure.http.cancellation import CancellationToken, RequestCancelled
from storefront.infrastructure.http.catalog_client import CatalogClient, build_query

BASE_URL = "http://testserver/api"


def _asgi_client() -> CatalogClient:
    return CatalogClient(BASE_URL, transport=httpx.ASGITransport(app=create_app()))


class TestBuildQuery:

    def test_drops_empty_values(self):
        assert build_query({"q": "", "category": None, "minPrice": 0, "sort": "price_asc"}) == {
            "minPrice": "0",
            "sort": "price_asc",
        }

    def test_none(self):
        assert build_query(None) == {}


class TestAgainstApi:

    @pytest.mark.asyncio
    async def test_fetch_products(self):
        async with _asgi_client() as client:
            result = await client.fetch_products(FilterCriteria(category="hats", sort="price_desc"))
        assert [p.title for p in result.items] == ["Beanie Urbano", "Gorro Clásico"]
        assert str(result.items[0].price) == "$24.99"
        assert result.total == 2

    @pytest.mark.asyncio
    async def test_fetch_products_from_mapping(self):
        async with _asgi_client() as client:
            result = await client.fetch_products({"minPrice": "30", "q": ""})
        assert [p.id for p in result.items] == ["hoodie-01", "hoodie-02"]

    @pytest.mark.asyncio
    async def test_fetch_product_by_id(self):
        async with _asgi_client() as client:
            product = await client.fetch_product_by_id("hat-02")
        assert product is not None
        assert product.colors == ("negro", "verde")

    @pytest.mark.asyncio
    async def test_fetch_missing_product_is_none(self):
        async with _asgi_client() as client:
            assert await client.fetch_product_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_health(self):
        async with _asgi_client() as client:
            assert await client.health() is True


class TestRequestShape:

    @pytest.mark.asyncio
    async def test_only_non_empty_criteria_are_sent(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"items": [], "total": 0})

        client = CatalogClient(BASE_URL, transport=httpx.MockTransport(handler))
        await client.fetch_products(FilterCriteria(q="", category="hats", max_price="40"))
        await client.aclose()

        assert len(seen) == 1
        assert seen[0].url.path == "/api/products"
        assert dict(seen[0].url.params) == {"category": "hats", "maxPrice": "40"}


class TestFailures:

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        client = CatalogClient(
            BASE_URL, transport=httpx.MockTransport(lambda r: httpx.Response(500, text="down"))
        )
        with pytest.raises(CatalogUnavailableError, match="status 500"):
            await client.fetch_products()

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = CatalogClient(BASE_URL, transport=httpx.MockTransport(refuse))
        with pytest.raises(CatalogUnavailableError):
            await client.fetch_product_by_id("hat-01")

    @pytest.mark.asyncio
    async def test_single_product_server_error_raises(self):
        client = CatalogClient(
            BASE_URL, transport=httpx.MockTransport(lambda r: httpx.Response(502))
        )
        with pytest.raises(CatalogUnavailableError):
            await client.fetch_product_by_id("hat-01")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(200, text="<html>proxy</html>"),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, json={"total": 1}),
        httpx.Response(200, json={"items": [{"id": "x", "title": "X"}], "total": 1}),
        httpx.Response(200, json={"items": ["x"], "total": 1}),
        httpx.Response(200, json={"items": [{"id": "x", "title": "X", "price": "-1", "category": "hats"}], "total": 1}),
    ])
    async def test_malformed_list_body_raises(self, response):
        client = CatalogClient(BASE_URL, transport=httpx.MockTransport(lambda r: response))
        with pytest.raises(CatalogUnavailableError):
            await client.fetch_products()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", [
        httpx.Response(200, text="not json"),
        httpx.Response(200, json=[1, 2]),
        httpx.Response(200, json={"id": "x"}),
    ])
    async def test_malformed_product_body_raises(self, response):
        client = CatalogClient(BASE_URL, transport=httpx.MockTransport(lambda r: response))
        with pytest.raises(CatalogUnavailableError):
            await client.fetch_product_by_id("x")

    @pytest.mark.asyncio
    async def test_health_is_false_for_unexpected_body(self):
        client = CatalogClient(
            BASE_URL, transport=httpx.MockTransport(lambda r: httpx.Response(200, json=["ok"]))
        )
        assert await client.health() is False

    @pytest.mark.asyncio
    async def test_health_is_false_when_unreachable(self):
        client = CatalogClient(
            BASE_URL, transport=httpx.MockTransport(lambda r: httpx.Response(503))
        )
        assert await client.health() is False


class TestCancellation:

    @pytest.mark.asyncio
    async def test_pre_cancelled_products_is_empty_and_never_sent(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"items": [], "total": 0})

        token = CancellationToken()
        token.cancel()
        client = CatalogClient(BASE_URL, transport=httpx.MockTransport(handler))
        assert await client.fetch_products(FilterCriteria(q="x"), token) == QueryResult.empty()
        assert calls == []

    @pytest.mark.asyncio
    async def test_cancel_while_in_flight_yields_empty(self):
        started = asyncio.Event()
        release = asyncio.Event()

        async def handler(request):
            started.set()
            await release.wait()
            return httpx.Response(
                200, json={"items": [{"id": "x", "title": "X", "price": 1, "category": "hats"}], "total": 1}
            )

        token = CancellationToken()
        client = CatalogClient(BASE_URL, transport=httpx.MockTransport(handler))
        pending = asyncio.create_task(client.fetch_products(token=token))
        await started.wait()
        token.cancel()
        release.set()

        assert await pending == QueryResult.empty()

    @pytest.mark.asyncio
    async def test_cancelled_single_product_is_none(self):
        started = asyncio.Event()

        async def handler(request):
            started.set()
            await asyncio.Event().wait()

        token = CancellationToken()
        client = CatalogClient(BASE_URL, transport=httpx.MockTransport(handler))
        pending = asyncio.create_task(client.fetch_product_by_id("hat-01", token))
        await started.wait()
        token.cancel()

        assert await pending is None

    @pytest.mark.asyncio
    async def test_uncancelled_token_passes_result_through(self):
        async with _asgi_client() as client:
            result = await client.fetch_products(FilterCriteria(q="beanie"), CancellationToken())
        assert [p.id for p in result.items] == ["hat-02"]


class TestCancellationToken:

    @pytest.mark.asyncio
    async def test_run_returns_result(self):
        async def work():
            return 42

        assert await CancellationToken().run(work()) == 42

    @pytest.mark.asyncio
    async def test_run_propagates_errors(self):
        async def work():
            raise ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            await CancellationToken().run(work())

    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self):
        token = CancellationToken()
        token.cancel()
        token.cancel()
        assert token.cancelled

        async def work():
            return 1

        with pytest.raises(RequestCancelled):
            await token.run(work())

    @pytest.mark.asyncio
    async def test_caller_cancellation_stops_the_request(self):
        started = asyncio.Event()
        stopped = asyncio.Event()

        async def work():
            started.set()
            try:
                await asyncio.Event().wait()
            finally:
                stopped.set()

        caller = asyncio.create_task(CancellationToken().run(work()))
        await started.wait()
        caller.cancel()

        with pytest.raises(asyncio.CancelledError):
            await caller
        await asyncio.wait_for(stopped.wait(), timeout=1)
