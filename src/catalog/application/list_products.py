"""Application service: List Products use case (query).

Only active products are listed. Filters combine with AND; the
``in_stock`` filter uses the product's computed stock aggregate.
"""

from __future__ import annotations

import math

from catalog.application.dto import ProductPageDTO, ProductQuery, to_product_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Gender, Money
from catalog.domain.repository.product_repository import ProductRepository

_SORT_KEYS = {
    "name": lambda p: p.name.lower(),
    "price": lambda p: p.price.amount,
    "created_at": lambda p: p.created_at,
    "rating": lambda p: p.rating.average,
}


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: ProductQuery) -> ProductPageDTO:
        if query.page < 1:
            raise ValidationError("Page must be at least 1")
        if query.limit < 1:
            raise ValidationError("Limit must be at least 1")

        matches = [p for p in self._product_repo.list_all() if self._matches(p, query)]
        matches = self._sorted(matches, query.sort)

        total = len(matches)
        start = (query.page - 1) * query.limit
        page_items = matches[start:start + query.limit]

        return ProductPageDTO(
            items=[to_product_dto(p) for p in page_items],
            page=query.page,
            limit=query.limit,
            total=total,
            pages=math.ceil(total / query.limit),
        )

    @staticmethod
    def _matches(product: Product, query: ProductQuery) -> bool:
        if not product.is_active:
            return False
        if query.product_type_id and product.product_type_id != query.product_type_id:
            return False
        if query.brand_id and product.brand_id != query.brand_id:
            return False
        if query.category and product.category != query.category:
            return False
        if query.gender and product.gender is not Gender.of(query.gender):
            return False
        if query.min_price is not None and product.price < Money.of(query.min_price):
            return False
        if query.max_price is not None and product.price > Money.of(query.max_price):
            return False
        if query.in_stock and not product.in_stock:
            return False
        if query.search:
            needle = query.search.lower()
            haystack = f"{product.name} {product.description}".lower()
            if needle not in haystack:
                return False
        return True

    @staticmethod
    def _sorted(products: list[Product], sort: str) -> list[Product]:
        descending = sort.startswith("-")
        key = sort.lstrip("-")
        if key not in _SORT_KEYS:
            allowed = ", ".join(sorted(_SORT_KEYS))
            raise ValidationError(f"Cannot sort by '{key}' (expected one of: {allowed})")
        return sorted(products, key=_SORT_KEYS[key], reverse=descending)
