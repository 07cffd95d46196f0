"""Application service: List Product Types use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductTypeDTO, to_product_type_dto
from catalog.domain.repository.product_type_repository import ProductTypeRepository


class ListProductTypesHandler:

    def __init__(self, product_type_repo: ProductTypeRepository) -> None:
        self._product_type_repo = product_type_repo

    def handle(self, is_active: bool | None = None, search: str | None = None) -> list[ProductTypeDTO]:
        product_types = self._product_type_repo.list_all()
        if is_active is not None:
            product_types = [t for t in product_types if t.is_active is is_active]
        if search:
            product_types = [t for t in product_types if search.lower() in t.name.lower()]
        return [to_product_type_dto(t) for t in sorted(product_types, key=lambda t: t.name.lower())]
