"""
FastAPI application serving the catalog.

Usage:
    storefront serve
    # or
    uvicorn storefront.infrastructure.api.app:app --reload --port 4000
"""
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.application.search_products import SearchProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.criteria import FilterCriteria
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.api.schemas import (
    HealthResponse,
    MessageResponse,
    ProductListResponse,
    ProductSchema,
)
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.logger import get_logger

logger = get_logger("api")


def create_app(repo: Optional[ProductRepository] = None) -> FastAPI:
    """Build the API around *repo* (the shared process catalog by default)."""
    repo = repo if repo is not None else product_repository()
    search_handler = SearchProductsHandler(product_repo=repo)
    show_handler = ShowProductHandler(product_repo=repo)

    app = FastAPI(title="Storefront Catalog API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info("404 %s: %s", request.url.path, exc)
        return JSONResponse(status_code=404, content={"message": str(exc)})

    @app.get("/api/products", response_model=ProductListResponse)
    def list_products(
        category: Optional[str] = None,
        q: Optional[str] = None,
        min_price: Optional[str] = Query(None, alias="minPrice"),
        max_price: Optional[str] = Query(None, alias="maxPrice"),
        sort: Optional[str] = None,
    ):
        criteria = FilterCriteria(
            category=category,
            q=q,
            min_price=min_price,
            max_price=max_price,
            sort=sort,
        )
        result = search_handler.handle(criteria)
        return ProductListResponse(
            items=[ProductSchema.from_product(p) for p in result.items],
            total=result.total,
        )

    @app.get(
        "/api/products/{product_id}",
        response_model=ProductSchema,
        responses={404: {"model": MessageResponse}},
    )
    def get_product(product_id: str):
        return ProductSchema.from_product(show_handler.handle(product_id))

    @app.get("/api/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok")

    return app


app = create_app()
