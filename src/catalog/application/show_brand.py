"""Application service: Show Brand use case (query)."""

from __future__ import annotations

from catalog.application.dto import BrandDTO, to_brand_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.brand_repository import BrandRepository


class ShowBrandHandler:

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    def handle(self, brand_id: str | None = None, slug: str | None = None) -> BrandDTO:
        """Look a brand up by ID or, failing that, by slug."""
        if brand_id is not None:
            brand = self._brand_repo.get_by_id(brand_id)
        elif slug is not None:
            brand = self._brand_repo.get_by_slug(slug.strip().lower())
        else:
            brand = None
        if brand is None:
            raise EntityNotFoundError("Brand not found")
        return to_brand_dto(brand)
