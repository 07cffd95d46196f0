"""Application service: Show Product Type use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductTypeDTO, to_product_type_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_type_repository import ProductTypeRepository


class ShowProductTypeHandler:

    def __init__(self, product_type_repo: ProductTypeRepository) -> None:
        self._product_type_repo = product_type_repo

    def handle(self, product_type_id: str | None = None, slug: str | None = None) -> ProductTypeDTO:
        """Look a product type up by ID or, failing that, by slug."""
        if product_type_id is not None:
            product_type = self._product_type_repo.get_by_id(product_type_id)
        elif slug is not None:
            product_type = self._product_type_repo.get_by_slug(slug.strip().lower())
        else:
            product_type = None
        if product_type is None:
            raise EntityNotFoundError("Product type not found")
        return to_product_type_dto(product_type)
