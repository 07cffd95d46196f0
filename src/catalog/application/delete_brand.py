"""Application service: Delete Brand use case (soft delete)."""

from __future__ import annotations

import structlog

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.brand_repository import BrandRepository

logger = structlog.get_logger(__name__)


class DeleteBrandHandler:

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    def handle(self, brand_id: str) -> None:
        brand = self._brand_repo.get_by_id(brand_id)
        if brand is None:
            raise EntityNotFoundError(f"Brand with ID '{brand_id}' not found")
        brand.deactivate()
        self._brand_repo.save(brand)
        logger.info("brand_deactivated", brand_id=brand_id)
