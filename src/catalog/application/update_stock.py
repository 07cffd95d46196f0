"""Application service: Update Stock use case.

Applies one signed delta to a single color/size slot of a product.
All-or-nothing: an insufficient-stock failure leaves the product as it was.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import parse_size
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.stock_update_service import (
    DEFAULT_MAX_ATTEMPTS,
    StockUpdateService,
)


class UpdateStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._product_repo = product_repo
        self._max_attempts = max_attempts

    def handle(
        self,
        product_id: str,
        color: str,
        size: int | str,
        quantity: int,
    ) -> ProductDTO:
        if not color or not isinstance(color, str):
            raise ValidationError("Color is required and must be a string")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError("Quantity must be an integer")
        parsed_size = parse_size(size)

        svc = StockUpdateService(self._product_repo, self._max_attempts)
        product = svc.load(product_id)
        product = svc.apply(product, color, parsed_size, quantity)
        return to_product_dto(product)
