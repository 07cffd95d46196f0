"""Application service: Update Brand use case.

Only supplied fields change; name and slug stay unique across brands.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import BrandChanges, BrandDTO, to_brand_dto
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.repository.brand_repository import BrandRepository

logger = structlog.get_logger(__name__)


class UpdateBrandHandler:

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    def handle(self, brand_id: str, changes: BrandChanges) -> BrandDTO:
        brand = self._brand_repo.get_by_id(brand_id)
        if brand is None:
            raise EntityNotFoundError(f"Brand with ID '{brand_id}' not found")

        if changes.name is not None:
            brand.rename(changes.name)
            other = self._brand_repo.get_by_name(brand.name)
            if other is not None and other.id != brand.id:
                raise ValidationError(f"Brand '{brand.name}' already exists")
        if changes.slug is not None:
            brand.change_slug(changes.slug)
            other = self._brand_repo.get_by_slug(str(brand.slug))
            if other is not None and other.id != brand.id:
                raise ValidationError(f"Brand with slug '{brand.slug}' already exists")
        if changes.description is not None:
            brand.describe(changes.description)
        if changes.logo is not None:
            brand.change_logo(changes.logo)
        if changes.website is not None:
            brand.change_website(changes.website)
        if changes.is_active is True:
            brand.activate()
        elif changes.is_active is False:
            brand.deactivate()

        self._brand_repo.save(brand)
        logger.info("brand_updated", brand_id=brand.id)
        return to_brand_dto(brand)
