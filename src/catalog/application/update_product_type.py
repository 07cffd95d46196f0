"""Application service: Update Product Type use case.

Only supplied fields change; name and slug stay unique across product types.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import (
    ProductTypeChanges,
    ProductTypeDTO,
    to_product_type_dto,
)
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.repository.product_type_repository import ProductTypeRepository

logger = structlog.get_logger(__name__)


class UpdateProductTypeHandler:

    def __init__(self, product_type_repo: ProductTypeRepository) -> None:
        self._product_type_repo = product_type_repo

    def handle(self, product_type_id: str, changes: ProductTypeChanges) -> ProductTypeDTO:
        product_type = self._product_type_repo.get_by_id(product_type_id)
        if product_type is None:
            raise EntityNotFoundError(f"Product type with ID '{product_type_id}' not found")

        if changes.name is not None:
            product_type.rename(changes.name)
            other = self._product_type_repo.get_by_name(product_type.name)
            if other is not None and other.id != product_type.id:
                raise ValidationError(f"Product type '{product_type.name}' already exists")
        if changes.slug is not None:
            product_type.change_slug(changes.slug)
            other = self._product_type_repo.get_by_slug(str(product_type.slug))
            if other is not None and other.id != product_type.id:
                raise ValidationError(f"Product type with slug '{product_type.slug}' already exists")
        if changes.description is not None:
            product_type.describe(changes.description)
        if changes.is_active is True:
            product_type.activate()
        elif changes.is_active is False:
            product_type.deactivate()

        self._product_type_repo.save(product_type)
        logger.info("product_type_updated", product_type_id=product_type.id)
        return to_product_type_dto(product_type)
