"""Integration tests for the CreateProduct use case."""

import pytest

from catalog.application.create_product import CreateProductHandler
from catalog.application.dto import ProductSpec
from catalog.domain.exceptions import ValidationError
from tests.builders import make_brand, make_product_type
from tests.fakes import (
    FakeBrandRepository,
    FakeProductRepository,
    FakeProductTypeRepository,
)


def _setup(brand_active: bool = True, type_active: bool = True):
    product_repo = FakeProductRepository()
    handler = CreateProductHandler(
        product_repo,
        FakeBrandRepository([make_brand(is_active=brand_active)]),
        FakeProductTypeRepository([make_product_type(is_active=type_active)]),
    )
    return handler, product_repo


def _spec(**overrides) -> ProductSpec:
    fields = dict(
        name="Air Runner",
        brand_id="b1",
        product_type_id="t1",
        category="sneakers",
        price="120.00",
        variants=[
            {"color": "black", "sizes": [{"size": 8, "stock": 10}, {"size": 9, "stock": 0}]},
            {"color": "white", "sizes": [{"size": 8, "stock": 2}], "images": ["w.jpg"]},
        ],
        gender="men",
    )
    fields.update(overrides)
    return ProductSpec(**fields)


class TestCreateProductHappyPath:

    def test_creates_product_with_stock_aggregates(self):
        handler, repo = _setup()
        dto = handler.handle(_spec())
        assert dto.name == "Air Runner"
        assert dto.price == "$120.00"
        assert dto.gender == "men"
        assert dto.total_stock == 12
        assert dto.in_stock
        assert dto.variants[1].images == ["w.jpg"]

    def test_persists_product(self):
        handler, repo = _setup()
        dto = handler.handle(_spec())
        saved = repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.version == 1
        assert saved.stock_by_size(8) == 12

    def test_discount_price(self):
        handler, _ = _setup()
        dto = handler.handle(_spec(discount_price="99.5"))
        assert dto.discount_price == "$99.50"


class TestCreateProductValidation:

    def test_unknown_brand(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Brand not found"):
            handler.handle(_spec(brand_id="nope"))

    def test_inactive_brand(self):
        handler, _ = _setup(brand_active=False)
        with pytest.raises(ValidationError, match="Brand is not active"):
            handler.handle(_spec())

    def test_unknown_product_type(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Product type not found"):
            handler.handle(_spec(product_type_id="nope"))

    def test_inactive_product_type(self):
        handler, _ = _setup(type_active=False)
        with pytest.raises(ValidationError, match="Product type is not active"):
            handler.handle(_spec())

    def test_no_variants(self):
        handler, repo = _setup()
        with pytest.raises(ValidationError, match="At least one color"):
            handler.handle(_spec(variants=[]))
        assert repo.list_all() == []

    def test_missing_stock(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Stock is required"):
            handler.handle(_spec(variants=[{"color": "black", "sizes": [{"size": 8}]}]))

    def test_negative_price(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle(_spec(price="-1"))

    def test_bad_gender(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Gender"):
            handler.handle(_spec(gender="adults"))

    @pytest.mark.parametrize("field, message", [
        ("name", "Product name is required"),
        ("category", "Category is required"),
        ("description", "Description must be a string"),
    ])
    def test_non_string_text_fields(self, field, message):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match=message):
            handler.handle(_spec(**{field: 5}))

    def test_color_images_must_be_a_list(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match='Images for color "black"'):
            handler.handle(_spec(variants=[
                {"color": "black", "sizes": [{"size": 8, "stock": 1}], "images": "a.jpg"},
            ]))

    def test_product_images_must_be_a_list(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Images must be a list"):
            handler.handle(_spec(images="a.jpg"))
