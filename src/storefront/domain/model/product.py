"""Product aggregate.

Products are owned by the server and never change once the catalog has
been loaded. The client holds copies of them in its product cache.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``stock`` of None means availability is unknown; such products are
    treated as always available. ``colors``, ``sizes`` and ``featured``
    are informational only.
    """

    id: str
    title: str
    description: str
    price: Money
    category: str
    images: tuple[str, ...] = field(default_factory=tuple)
    colors: tuple[str, ...] = field(default_factory=tuple)
    sizes: tuple[str, ...] = field(default_factory=tuple)
    stock: int | None = None
    featured: bool = False

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if self.stock is not None and self.stock < 0:
            raise ValidationError(
                f"Product stock cannot be negative, got {self.stock}"
            )

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None

    @property
    def is_available(self) -> bool:
        return self.stock is None or self.stock > 0

    # --- Serialization --------------------------------------------------------

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Product:
        """Build a Product from its JSON shape (as served by the API)."""
        try:
            return cls(
                id=str(raw["id"]),
                title=raw["title"],
                description=raw.get("description") or "",
                price=Money.of(raw["price"]),
                category=raw["category"],
                images=tuple(raw.get("images") or ()),
                colors=tuple(raw.get("colors") or ()),
                sizes=tuple(raw.get("sizes") or ()),
                stock=raw.get("stock"),
                featured=bool(raw.get("featured", False)),
            )
        except KeyError as exc:
            raise ValidationError(f"Product is missing field {exc.args[0]!r}") from exc

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "price": float(self.price.amount),
            "images": list(self.images),
            "category": self.category,
            "colors": list(self.colors),
            "sizes": list(self.sizes),
            "stock": self.stock,
            "featured": self.featured,
        }
