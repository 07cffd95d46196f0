"""Integration tests for the UpdateStock and StockBySize use cases.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from catalog.application.show_stock_by_size import ShowStockBySizeHandler
from catalog.application.update_stock import UpdateStockHandler
from catalog.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from catalog.domain.model.product import ColorVariant, SizeVariant
from tests.builders import make_product
from tests.fakes import FakeProductRepository


def _setup(stock: int = 10) -> tuple[UpdateStockHandler, FakeProductRepository]:
    repo = FakeProductRepository([
        make_product([ColorVariant("black", [SizeVariant(8, stock)])]),
    ])
    return UpdateStockHandler(repo), repo


class TestUpdateStockHappyPath:

    def test_consumption(self):
        handler, repo = _setup(stock=10)
        dto = handler.handle("p1", color="black", size=8, quantity=-5)
        assert dto.total_stock == 5
        assert dto.variants[0].sizes[0].stock == 5
        assert repo.get_by_id("p1").total_stock == 5

    def test_creates_missing_color_and_size(self):
        handler, repo = _setup(stock=0)
        dto = handler.handle("p1", color="red", size=9, quantity=3)
        assert [v.color for v in dto.variants] == ["black", "red"]
        assert dto.variants[1].sizes[0].size == 9
        assert dto.variants[1].sizes[0].stock == 3
        assert dto.in_stock

    def test_label_size_kept_apart_from_numeric(self):
        handler, repo = _setup(stock=10)
        dto = handler.handle("p1", color="black", size="8", quantity=2)
        sizes = {(type(s.size), s.size): s.stock for s in dto.variants[0].sizes}
        assert sizes == {(int, 8): 10, (str, "8"): 2}

    def test_version_bumped(self):
        handler, _ = _setup()
        dto = handler.handle("p1", color="black", size=8, quantity=1)
        assert dto.version == 1


class TestUpdateStockFailures:

    def test_insufficient_stock_leaves_product_unchanged(self):
        handler, repo = _setup(stock=5)
        with pytest.raises(InsufficientStockError, match="Available: 5, Requested: -10"):
            handler.handle("p1", color="black", size=8, quantity=-10)
        saved = repo.get_by_id("p1")
        assert saved.total_stock == 5
        assert saved.version == 0

    def test_unknown_product(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("missing", color="black", size=8, quantity=1)

    def test_missing_color_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Color is required"):
            handler.handle("p1", color="", size=8, quantity=1)

    def test_bad_quantity_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Quantity must be an integer"):
            handler.handle("p1", color="black", size=8, quantity="5")

    def test_bad_size_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Size must be"):
            handler.handle("p1", color="black", size=None, quantity=1)


class TestStockBySize:

    def test_sums_across_colors(self):
        repo = FakeProductRepository([
            make_product([
                ColorVariant("black", [SizeVariant(8, 10), SizeVariant("M", 1)]),
                ColorVariant("white", [SizeVariant(8, 4)]),
            ]),
        ])
        handler = ShowStockBySizeHandler(repo)
        assert handler.handle("p1", 8) == 14
        assert handler.handle("p1", "M") == 1
        assert handler.handle("p1", "8") == 0

    def test_unknown_product(self):
        handler = ShowStockBySizeHandler(FakeProductRepository())
        with pytest.raises(EntityNotFoundError):
            handler.handle("missing", 8)
