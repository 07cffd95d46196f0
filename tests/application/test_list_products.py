"""Integration tests for the ListProducts use case."""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.application.dto import ProductQuery
from catalog.application.list_products import ListProductsHandler
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import ColorVariant, SizeVariant
from catalog.domain.model.value_objects import Gender, Money
from tests.builders import make_product
from tests.fakes import FakeProductRepository

_T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _setup() -> ListProductsHandler:
    products = [
        make_product(id="a", name="Alpha", price=Money.of("50"), gender=Gender.MEN,
                     created_at=_T0, description="trail shoe"),
        make_product(id="b", name="Bravo", price=Money.of("150"), brand_id="b2",
                     created_at=_T0 + timedelta(days=1),
                     variants=[ColorVariant("black", [SizeVariant(8, 0)])]),
        make_product(id="c", name="Charlie", price=Money.of("100"), category="boots",
                     created_at=_T0 + timedelta(days=2)),
        make_product(id="d", name="Delta", created_at=_T0 + timedelta(days=3), is_active=False),
    ]
    return ListProductsHandler(FakeProductRepository(products))


def _ids(page) -> list[str]:
    return [p.id for p in page.items]


class TestListProducts:

    def test_default_newest_first_and_active_only(self):
        page = _setup().handle(ProductQuery())
        assert _ids(page) == ["c", "b", "a"]
        assert page.total == 3
        assert page.pages == 1

    def test_filters(self):
        handler = _setup()
        assert _ids(handler.handle(ProductQuery(category="boots"))) == ["c"]
        assert _ids(handler.handle(ProductQuery(brand_id="b2"))) == ["b"]
        assert _ids(handler.handle(ProductQuery(gender="men"))) == ["a"]
        assert _ids(handler.handle(ProductQuery(in_stock=True))) == ["c", "a"]
        assert _ids(handler.handle(ProductQuery(search="TRAIL"))) == ["a"]

    def test_price_range(self):
        page = _setup().handle(ProductQuery(min_price="60", max_price="150", sort="price"))
        assert _ids(page) == ["c", "b"]

    def test_sorting(self):
        handler = _setup()
        assert _ids(handler.handle(ProductQuery(sort="name"))) == ["a", "b", "c"]
        assert _ids(handler.handle(ProductQuery(sort="-price"))) == ["b", "c", "a"]

    def test_pagination(self):
        page = _setup().handle(ProductQuery(sort="name", page=2, limit=2))
        assert _ids(page) == ["c"]
        assert page.total == 3
        assert page.pages == 2

    def test_invalid_sort(self):
        with pytest.raises(ValidationError, match="Cannot sort by"):
            _setup().handle(ProductQuery(sort="colour"))

    def test_invalid_page(self):
        with pytest.raises(ValidationError, match="Page"):
            _setup().handle(ProductQuery(page=0))
