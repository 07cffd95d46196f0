"""JSON-file-backed implementation of ProductRepository.

Each product is one document with its variants tree embedded inline.
Sizes are stored in their native JSON type (number or string), which
is what keeps numeric 8 and label "8" apart after a round trip.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import structlog

from catalog.domain.exceptions import ConcurrencyConflictError
from catalog.domain.model.product import ColorVariant, Product, SizeVariant
from catalog.domain.model.value_objects import Gender, Money, Rating
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_document_store import (
    DEFAULT_LOCK_TIMEOUT,
    JsonDocumentStore,
)

logger = structlog.get_logger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self._store = JsonDocumentStore(file_path, lock_timeout=lock_timeout)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._store.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._store.load()]

    def save(self, product: Product) -> None:
        with self._store.locked():
            documents = self._store.load()
            index = next(
                (i for i, raw in enumerate(documents) if raw["id"] == product.id),
                None,
            )
            stored_version = documents[index]["version"] if index is not None else 0
            if stored_version != product.version:
                logger.debug(
                    "product_version_mismatch",
                    product_id=product.id,
                    expected=product.version,
                    stored=stored_version,
                )
                raise ConcurrencyConflictError(
                    f"Product '{product.id}' was modified concurrently "
                    f"(expected version {product.version}, found {stored_version})"
                )

            document = self._to_raw(product)
            document["version"] = product.version + 1
            if index is None:
                documents.append(document)
            else:
                documents[index] = document
            self._store.persist(documents)
            product.version += 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "brand_id": product.brand_id,
            "product_type_id": product.product_type_id,
            "category": product.category,
            "gender": product.gender.value,
            "description": product.description,
            "price": str(product.price.amount),
            "discount_price": (
                str(product.discount_price.amount) if product.discount_price else None
            ),
            "currency": product.price.currency,
            "variants": [
                {
                    "color": cv.color,
                    "sizes": [
                        {"size": sv.size.to_raw(), "stock": sv.stock} for sv in cv.sizes
                    ],
                    "images": list(cv.images),
                }
                for cv in product.variants
            ],
            "images": list(product.images),
            "is_active": product.is_active,
            "rating": {"average": product.rating.average, "count": product.rating.count},
            "version": product.version,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")
        discount = raw.get("discount_price")
        rating = raw.get("rating") or {}
        return Product(
            id=raw["id"],
            name=raw["name"],
            brand_id=raw["brand_id"],
            product_type_id=raw["product_type_id"],
            category=raw["category"],
            gender=Gender(raw.get("gender", "unisex")),
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), currency),
            discount_price=Money(Decimal(discount), currency) if discount else None,
            variants=[
                ColorVariant(
                    color=cv["color"],
                    sizes=[SizeVariant(size=sv["size"], stock=sv["stock"]) for sv in cv["sizes"]],
                    images=list(cv.get("images", [])),
                )
                for cv in raw.get("variants", [])
            ],
            images=list(raw.get("images", [])),
            is_active=raw.get("is_active", True),
            rating=Rating(rating.get("average", 0.0), rating.get("count", 0)),
            version=raw.get("version", 0),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
