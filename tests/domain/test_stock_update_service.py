"""Unit tests for the StockUpdateService domain service."""

import pytest

from catalog.domain.exceptions import (
    ConcurrencyConflictError,
    EntityNotFoundError,
    InsufficientStockError,
)
from catalog.domain.model.value_objects import NumericSize
from catalog.domain.service.stock_update_service import StockUpdateService
from tests.builders import make_product
from tests.fakes import FakeProductRepository


def _setup(max_attempts: int = 3):
    repo = FakeProductRepository([make_product()])
    svc = StockUpdateService(repo, max_attempts=max_attempts)
    return svc, repo


class TestStockUpdateService:

    def test_apply_persists(self):
        svc, repo = _setup()
        product = svc.apply(svc.load("p1"), "black", NumericSize(8), -3)
        assert product.version == 1
        assert repo.get_by_id("p1").total_stock == 7

    def test_unknown_product(self):
        svc, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            svc.load("nope")

    def test_insufficient_stock_not_persisted(self):
        svc, repo = _setup()
        with pytest.raises(InsufficientStockError):
            svc.apply(svc.load("p1"), "black", NumericSize(8), -11)
        assert repo.save_count == 0
        assert repo.get_by_id("p1").total_stock == 10

    def test_conflict_is_retried_against_fresh_state(self):
        svc, repo = _setup()
        repo.interleave_writes(1)
        product = svc.apply(svc.load("p1"), "black", NumericSize(8), -3)
        assert product.total_stock == 7
        assert repo.save_count == 1
        assert repo.get_by_id("p1").version == product.version

    def test_conflict_gives_up_after_max_attempts(self):
        svc, repo = _setup(max_attempts=2)
        repo.interleave_writes(5)
        with pytest.raises(ConcurrencyConflictError):
            svc.apply(svc.load("p1"), "black", NumericSize(8), -3)
        assert repo.get_by_id("p1").total_stock == 10

    def test_stale_copy_cannot_overdraw(self):
        svc, repo = _setup()
        first = svc.load("p1")
        second = svc.load("p1")
        svc.apply(first, "black", NumericSize(8), -8)
        # second was loaded at the old version; retry sees only 2 left
        with pytest.raises(InsufficientStockError):
            svc.apply(second, "black", NumericSize(8), -8)
        assert repo.get_by_id("p1").total_stock == 2

    def test_caller_instance_is_not_modified(self):
        svc, _ = _setup()
        product = svc.load("p1")
        saved = svc.apply(product, "black", NumericSize(8), -3)
        assert saved is not product
        assert product.total_stock == 10
        assert product.version == 0

    def test_retry_against_drained_stock_leaves_caller_untouched(self):
        svc, repo = _setup()
        repo.interleave_writes(1, change=lambda p: p.update_stock("black", 8, -p.stock_by_size(8)))
        product = svc.load("p1")
        with pytest.raises(InsufficientStockError, match="Available: 0, Requested: -3"):
            svc.apply(product, "black", NumericSize(8), -3)
        assert product.total_stock == 10
        assert product.version == 0
        assert repo.get_by_id("p1").total_stock == 0
