"""Abstract repository for Brand aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.brand import Brand


class BrandRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new unique brand ID."""

    @abstractmethod
    def get_by_id(self, brand_id: str) -> Brand | None:
        """Return a brand by its ID, or None."""

    @abstractmethod
    def get_by_slug(self, slug: str) -> Brand | None:
        """Return a brand by its slug, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> Brand | None:
        """Return a brand by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Brand]:
        """Return every brand."""

    @abstractmethod
    def save(self, brand: Brand) -> None:
        """Persist a new or updated brand."""
