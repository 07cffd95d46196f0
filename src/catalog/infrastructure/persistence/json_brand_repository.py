"""JSON-file-backed implementation of BrandRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path

from catalog.domain.model.brand import Brand
from catalog.domain.model.value_objects import Slug
from catalog.domain.repository.brand_repository import BrandRepository
from catalog.infrastructure.persistence.json_document_store import (
    DEFAULT_LOCK_TIMEOUT,
    JsonDocumentStore,
)


class JsonBrandRepository(BrandRepository):

    def __init__(self, file_path: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self._store = JsonDocumentStore(file_path, lock_timeout=lock_timeout)

    # --- BrandRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def get_by_id(self, brand_id: str) -> Brand | None:
        return self._find(lambda raw: raw["id"] == brand_id)

    def get_by_slug(self, slug: str) -> Brand | None:
        return self._find(lambda raw: raw["slug"] == slug)

    def get_by_name(self, name: str) -> Brand | None:
        return self._find(lambda raw: raw["name"].lower() == name.lower())

    def list_all(self) -> list[Brand]:
        return [self._to_domain(raw) for raw in self._store.load()]

    def save(self, brand: Brand) -> None:
        self._store.upsert(self._to_raw(brand))

    # --- Serialization --------------------------------------------------------

    def _find(self, predicate) -> Brand | None:
        for raw in self._store.load():
            if predicate(raw):
                return self._to_domain(raw)
        return None

    @staticmethod
    def _to_raw(brand: Brand) -> dict:
        return {
            "id": brand.id,
            "name": brand.name,
            "slug": str(brand.slug),
            "description": brand.description,
            "logo": brand.logo,
            "website": brand.website,
            "is_active": brand.is_active,
            "created_at": brand.created_at.isoformat(),
            "updated_at": brand.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Brand:
        return Brand(
            id=raw["id"],
            name=raw["name"],
            slug=Slug(raw["slug"]),
            description=raw.get("description", ""),
            logo=raw.get("logo", ""),
            website=raw.get("website", ""),
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
