"""Application service: Add Brand use case."""

from __future__ import annotations

import structlog

from catalog.application.dto import BrandDTO, to_brand_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.brand import Brand
from catalog.domain.repository.brand_repository import BrandRepository

logger = structlog.get_logger(__name__)


class AddBrandHandler:

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    def handle(
        self,
        name: str,
        slug: str | None = None,
        description: str = "",
        logo: str = "",
        website: str = "",
        is_active: bool = True,
    ) -> BrandDTO:
        """Add a new brand; the slug is derived from the name if omitted."""
        brand = Brand.create(
            id=self._brand_repo.next_id(),
            name=name,
            slug=slug,
            description=description,
            logo=logo,
            website=website,
            is_active=is_active,
        )

        if self._brand_repo.get_by_name(brand.name) is not None:
            raise ValidationError(f"Brand '{brand.name}' already exists")
        if self._brand_repo.get_by_slug(str(brand.slug)) is not None:
            raise ValidationError(f"Brand with slug '{brand.slug}' already exists")

        self._brand_repo.save(brand)
        logger.info("brand_created", brand_id=brand.id, slug=str(brand.slug))
        return to_brand_dto(brand)
