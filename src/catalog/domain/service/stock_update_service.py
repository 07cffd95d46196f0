"""Domain service: Stock Update.

Applies a single stock delta to a product and persists it. Persistence
is a compare-and-swap on the product's version, so two callers racing
on the same product cannot both decide their delta is safe against the
same stale stock. On a version conflict the product is reloaded and the
delta is re-applied against the fresh state, up to ``max_attempts``.

Each attempt works on a copy, so the instance a caller passes in is
never left holding a delta that did not reach storage.
"""

from __future__ import annotations

import copy

import structlog

from catalog.domain.exceptions import (
    ConcurrencyConflictError,
    EntityNotFoundError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Size
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


class StockUpdateService:

    def __init__(
        self,
        product_repo: ProductRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValidationError("max_attempts must be at least 1")
        self._product_repo = product_repo
        self._max_attempts = max_attempts

    def load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def apply(self, product: Product, color: str, size: Size, quantity: int) -> Product:
        """Apply one delta and persist, retrying on version conflicts.

        Returns the persisted product as a new instance; *product* itself
        is not modified. InsufficientStockError propagates untouched.
        """
        for attempt in range(1, self._max_attempts + 1):
            working = copy.deepcopy(product)
            working.update_stock(color, size, quantity)
            try:
                self._product_repo.save(working)
            except ConcurrencyConflictError:
                logger.warning(
                    "stock_update_conflict",
                    product_id=product.id,
                    color=color,
                    size=str(size),
                    attempt=attempt,
                )
                if attempt == self._max_attempts:
                    raise
                product = self.load(product.id)
                continue

            logger.info(
                "stock_updated",
                product_id=product.id,
                color=color,
                size=str(size),
                quantity=quantity,
                version=working.version,
            )
            return working

        raise ConcurrencyConflictError(  # pragma: no cover
            f"Product '{product.id}' kept changing during stock update"
        )
