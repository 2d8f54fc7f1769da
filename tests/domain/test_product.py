"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

RAW = {
    "id": "hat-01",
    "title": "Gorro Clásico",
    "description": "Gorro tejido clásico.",
    "price": 19.99,
    "images": ["/GorroNY.JPG", "/back.jpg"],
    "category": "hats",
    "colors": ["negro", "gris"],
    "sizes": ["única"],
    "stock": 42,
    "featured": True,
}


class TestProductFromDict:

    def test_reads_every_field(self):
        p = Product.from_dict(RAW)
        assert p.id == "hat-01"
        assert p.price == Money(Decimal("19.99"))
        assert p.images == ("/GorroNY.JPG", "/back.jpg")
        assert p.colors == ("negro", "gris")
        assert p.sizes == ("única",)
        assert p.stock == 42
        assert p.featured is True

    def test_optional_fields_default(self):
        p = Product.from_dict({"id": "x", "title": "X", "price": "5", "category": "hats"})
        assert p.description == ""
        assert p.images == ()
        assert p.stock is None
        assert p.featured is False

    def test_missing_required_field_rejected(self):
        with pytest.raises(ValidationError, match="missing field 'price'"):
            Product.from_dict({"id": "x", "title": "X", "category": "hats"})

    def test_to_dict_matches_wire_shape(self):
        assert Product.from_dict(RAW).to_dict() == RAW


class TestProductInvariants:

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError, match="id is required"):
            Product(id="", title="X", description="", price=Money.of("1"), category="hats")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product(id="x", title="X", description="", price=Money.of("1"),
                    category="hats", stock=-1)

    def test_is_frozen(self):
        p = Product.from_dict(RAW)
        with pytest.raises(AttributeError):
            p.price = Money.of("1")  # type: ignore[misc]


class TestProductDerived:

    def test_primary_image_is_first(self):
        assert Product.from_dict(RAW).primary_image == "/GorroNY.JPG"

    def test_primary_image_absent_when_no_images(self):
        p = Product.from_dict({**RAW, "images": []})
        assert p.primary_image is None

    @pytest.mark.parametrize("stock, available", [(None, True), (3, True), (0, False)])
    def test_availability(self, stock, available):
        assert Product.from_dict({**RAW, "stock": stock}).is_available is available
