"""
Response schemas for the catalog API.

These mirror the Product JSON shape consumed by the storefront client.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from storefront.domain.model.product import Product


class ProductSchema(BaseModel):
    id: str = Field(..., description="Unique product identifier")
    title: str = Field(..., description="Product title")
    description: str = Field("", description="Short description, searched alongside the title")
    price: float = Field(..., ge=0, description="Unit price")
    images: List[str] = Field(default_factory=list, description="Image paths; the first one is primary")
    category: str = Field(..., description="Category tag, e.g. hats or hoodies")
    colors: List[str] = Field(default_factory=list, description="Available colors")
    sizes: List[str] = Field(default_factory=list, description="Available sizes")
    stock: Optional[int] = Field(None, ge=0, description="Units available; null when unknown")
    featured: bool = Field(False, description="Whether the product is highlighted")

    @classmethod
    def from_product(cls, product: Product) -> "ProductSchema":
        return cls(**product.to_dict())


class ProductListResponse(BaseModel):
    items: List[ProductSchema]
    total: int


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
