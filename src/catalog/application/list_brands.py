"""Application service: List Brands use case (query)."""

from __future__ import annotations

from catalog.application.dto import BrandDTO, to_brand_dto
from catalog.domain.repository.brand_repository import BrandRepository


class ListBrandsHandler:

    def __init__(self, brand_repo: BrandRepository) -> None:
        self._brand_repo = brand_repo

    def handle(self, is_active: bool | None = None, search: str | None = None) -> list[BrandDTO]:
        brands = self._brand_repo.list_all()
        if is_active is not None:
            brands = [b for b in brands if b.is_active is is_active]
        if search:
            brands = [b for b in brands if search.lower() in b.name.lower()]
        return [to_brand_dto(b) for b in sorted(brands, key=lambda b: b.name.lower())]
