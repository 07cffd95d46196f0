"""Application service: Stock By Size use case (query).

Answers "how many units of size X exist regardless of color".
"""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class ShowStockBySizeHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, size: int | str) -> int:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product.stock_by_size(size)
