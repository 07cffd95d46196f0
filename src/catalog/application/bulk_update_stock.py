"""Application service: Bulk Update Stock use case.

Applies many color/size deltas to one product, best effort. Each
(color, size, quantity) triple goes through the same single-delta
primitive as ``UpdateStockHandler``; a failing triple is recorded and
never rolls back the triples that already succeeded.

Input shape::

    [{"color": "black", "sizes": [{"size": 8, "quantity": -2}]}]
"""

from __future__ import annotations

import structlog

from catalog.application.dto import BulkStockResultDTO, to_product_dto
from catalog.domain.exceptions import (
    BulkStockUpdateError,
    DomainException,
    ValidationError,
)
from catalog.domain.model.value_objects import parse_size
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.stock_update_service import (
    DEFAULT_MAX_ATTEMPTS,
    StockUpdateService,
)

logger = structlog.get_logger(__name__)


class BulkUpdateStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._product_repo = product_repo
        self._max_attempts = max_attempts

    def handle(self, product_id: str, variants: list[dict]) -> BulkStockResultDTO:
        """Apply every triple in input order.

        Raises BulkStockUpdateError if at least one triple failed and
        none succeeded. Otherwise returns the updated product with the
        success descriptions and any per-triple error strings.
        """
        if not isinstance(variants, list):
            raise ValidationError(
                "variants is required and must be a list of color variants with sizes"
            )

        svc = StockUpdateService(self._product_repo, self._max_attempts)
        product = svc.load(product_id)

        updates: list[str] = []
        errors: list[str] = []

        for variant in variants:
            color = variant.get("color") if isinstance(variant, dict) else None
            if not color or not isinstance(color, str):
                errors.append("Invalid variant: color is required and must be a string")
                continue

            sizes = variant.get("sizes")
            if not isinstance(sizes, list):
                errors.append(f'Invalid variant for color "{color}": sizes must be a list')
                continue

            for size_update in sizes:
                if not isinstance(size_update, dict):
                    errors.append(f'Invalid size entry for color "{color}": must be an object')
                    continue

                raw_size = size_update.get("size")
                try:
                    size = parse_size(raw_size)
                except ValidationError as exc:
                    errors.append(f'Invalid size for color "{color}": {exc}')
                    continue

                quantity = size_update.get("quantity")
                if isinstance(quantity, bool) or not isinstance(quantity, int):
                    errors.append(
                        f'Invalid quantity for color "{color}" size {size}: must be an integer'
                    )
                    continue

                try:
                    product = svc.apply(product, color, size, quantity)
                except DomainException as exc:
                    errors.append(f"Error updating {color} size {size}: {exc}")
                    # another writer may have moved the product on
                    product = svc.load(product_id)
                    continue
                updates.append(f"{color} size {size}: {_signed(quantity)}")

        logger.info(
            "bulk_stock_updated",
            product_id=product_id,
            succeeded=len(updates),
            failed=len(errors),
        )

        if errors and not updates:
            raise BulkStockUpdateError(errors)

        return BulkStockResultDTO(
            product=to_product_dto(product),
            updates=updates,
            errors=errors,
        )


def _signed(quantity: int) -> str:
    return f"+{quantity}" if quantity > 0 else str(quantity)
