"""Application service: Update Product use case.

Replaces any supplied field of a product. Replacing ``variants`` swaps
the whole stock tree in one go, bypassing the stock update primitive,
so the Product aggregate re-validates the new tree before accepting it.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import (
    ProductChanges,
    ProductDTO,
    to_product_dto,
    variants_from_raw,
)
from catalog.application.references import (
    require_active_brand,
    require_active_product_type,
)
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import Gender, Money
from catalog.domain.repository.brand_repository import BrandRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.product_type_repository import ProductTypeRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        brand_repo: BrandRepository,
        product_type_repo: ProductTypeRepository,
    ) -> None:
        self._product_repo = product_repo
        self._brand_repo = brand_repo
        self._product_type_repo = product_type_repo

    def handle(self, product_id: str, changes: ProductChanges) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if changes.product_type_id is not None:
            require_active_product_type(self._product_type_repo, changes.product_type_id)
            product.assign_product_type(changes.product_type_id)
        if changes.brand_id is not None:
            require_active_brand(self._brand_repo, changes.brand_id)
            product.assign_brand(changes.brand_id)

        if changes.name is not None:
            product.rename(changes.name)
        if changes.description is not None:
            product.describe(changes.description)
        if changes.category is not None:
            product.recategorize(changes.category)
        if changes.gender is not None:
            product.set_gender(Gender.of(changes.gender))
        if changes.price is not None or changes.discount_price is not None:
            product.update_price(
                Money.of(changes.price) if changes.price is not None else product.price,
                Money.of(changes.discount_price)
                if changes.discount_price is not None
                else None,
            )
        if changes.images is not None:
            product.replace_images(changes.images)
        if changes.variants is not None:
            product.replace_variants(variants_from_raw(changes.variants))
        if changes.is_active is True:
            product.activate()
        elif changes.is_active is False:
            product.deactivate()

        self._product_repo.save(product)
        logger.info("product_updated", product_id=product.id, version=product.version)
        return to_product_dto(product)
