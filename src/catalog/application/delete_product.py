"""Application service: Delete Product use case.

Soft delete: the product is marked inactive and drops out of listings,
but its document and stock history stay in storage.
"""

from __future__ import annotations

import structlog

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        product.deactivate()
        self._product_repo.save(product)
        logger.info("product_deactivated", product_id=product_id)
