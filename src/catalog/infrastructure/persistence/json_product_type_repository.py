"""JSON-file-backed implementation of ProductTypeRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path

from catalog.domain.model.product_type import ProductType
from catalog.domain.model.value_objects import Slug
from catalog.domain.repository.product_type_repository import ProductTypeRepository
from catalog.infrastructure.persistence.json_document_store import (
    DEFAULT_LOCK_TIMEOUT,
    JsonDocumentStore,
)


class JsonProductTypeRepository(ProductTypeRepository):

    def __init__(self, file_path: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self._store = JsonDocumentStore(file_path, lock_timeout=lock_timeout)

    # --- ProductTypeRepository interface --------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, product_type_id: str) -> ProductType | None:
        for raw in self._store.load():
            if raw["id"] == product_type_id:
                return self._to_domain(raw)
        return None

    def get_by_slug(self, slug: str) -> ProductType | None:
        for raw in self._store.load():
            if raw["slug"] == slug:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> ProductType | None:
        for raw in self._store.load():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[ProductType]:
        return [self._to_domain(raw) for raw in self._store.load()]

    def save(self, product_type: ProductType) -> None:
        self._store.upsert(self._to_raw(product_type))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product_type: ProductType) -> dict:
        return {
            "id": product_type.id,
            "name": product_type.name,
            "slug": str(product_type.slug),
            "description": product_type.description,
            "is_active": product_type.is_active,
            "created_at": product_type.created_at.isoformat(),
            "updated_at": product_type.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ProductType:
        return ProductType(
            id=raw["id"],
            name=raw["name"],
            slug=Slug(raw["slug"]),
            description=raw.get("description", ""),
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
