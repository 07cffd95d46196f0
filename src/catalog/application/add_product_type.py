"""Application service: Add Product Type use case."""

from __future__ import annotations

import structlog

from catalog.application.dto import ProductTypeDTO, to_product_type_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product_type import ProductType
from catalog.domain.repository.product_type_repository import ProductTypeRepository

logger = structlog.get_logger(__name__)


class AddProductTypeHandler:

    def __init__(self, product_type_repo: ProductTypeRepository) -> None:
        self._product_type_repo = product_type_repo

    def handle(
        self,
        name: str,
        slug: str | None = None,
        description: str = "",
        is_active: bool = True,
    ) -> ProductTypeDTO:
        """Add a new product type; the slug is derived from the name if omitted."""
        product_type = ProductType.create(
            id=self._product_type_repo.next_id(),
            name=name,
            slug=slug,
            description=description,
            is_active=is_active,
        )

        if self._product_type_repo.get_by_name(product_type.name) is not None:
            raise ValidationError(f"Product type '{product_type.name}' already exists")
        if self._product_type_repo.get_by_slug(str(product_type.slug)) is not None:
            raise ValidationError(f"Product type with slug '{product_type.slug}' already exists")

        self._product_type_repo.save(product_type)
        logger.info(
            "product_type_created",
            product_type_id=product_type.id,
            slug=str(product_type.slug),
        )
        return to_product_type_dto(product_type)
