"""Application service: Create Product use case.

The variants tree is supplied in full here and validated by the
Product aggregate; afterwards stock only changes through the stock
update use cases.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import (
    ProductDTO,
    ProductSpec,
    to_product_dto,
    variants_from_raw,
)
from catalog.application.references import (
    require_active_brand,
    require_active_product_type,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Gender, Money
from catalog.domain.repository.brand_repository import BrandRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.product_type_repository import ProductTypeRepository

logger = structlog.get_logger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        brand_repo: BrandRepository,
        product_type_repo: ProductTypeRepository,
    ) -> None:
        self._product_repo = product_repo
        self._brand_repo = brand_repo
        self._product_type_repo = product_type_repo

    def handle(self, spec: ProductSpec) -> ProductDTO:
        require_active_product_type(self._product_type_repo, spec.product_type_id)
        require_active_brand(self._brand_repo, spec.brand_id)

        product = Product.create(
            id=self._product_repo.next_id(),
            name=spec.name,
            brand_id=spec.brand_id,
            product_type_id=spec.product_type_id,
            category=spec.category,
            price=Money.of(spec.price),
            variants=variants_from_raw(spec.variants),
            gender=Gender.of(spec.gender),
            description=spec.description,
            discount_price=(
                Money.of(spec.discount_price) if spec.discount_price is not None else None
            ),
            images=spec.images,
        )
        self._product_repo.save(product)
        logger.info("product_created", product_id=product.id, name=product.name)
        return to_product_dto(product)
