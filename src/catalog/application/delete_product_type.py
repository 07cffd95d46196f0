"""Application service: Delete Product Type use case (soft delete)."""

from __future__ import annotations

import structlog

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_type_repository import ProductTypeRepository

logger = structlog.get_logger(__name__)


class DeleteProductTypeHandler:

    def __init__(self, product_type_repo: ProductTypeRepository) -> None:
        self._product_type_repo = product_type_repo

    def handle(self, product_type_id: str) -> None:
        product_type = self._product_type_repo.get_by_id(product_type_id)
        if product_type is None:
            raise EntityNotFoundError(f"Product type with ID '{product_type_id}' not found")
        product_type.deactivate()
        self._product_type_repo.save(product_type)
        logger.info("product_type_deactivated", product_type_id=product_type_id)
