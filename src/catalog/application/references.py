"""Checks that a product's brand and product type can be attached to it."""

from __future__ import annotations

from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.brand_repository import BrandRepository
from catalog.domain.repository.product_type_repository import ProductTypeRepository


def require_active_brand(brand_repo: BrandRepository, brand_id: str) -> None:
    brand = brand_repo.get_by_id(brand_id)
    if brand is None:
        raise ValidationError("Brand not found")
    if not brand.is_active:
        raise ValidationError("Brand is not active")


def require_active_product_type(
    product_type_repo: ProductTypeRepository, product_type_id: str
) -> None:
    product_type = product_type_repo.get_by_id(product_type_id)
    if product_type is None:
        raise ValidationError("Product type not found")
    if not product_type.is_active:
        raise ValidationError("Product type is not active")
