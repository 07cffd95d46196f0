"""Abstract repository for ProductType aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product_type import ProductType


class ProductTypeRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new unique product type ID."""

    @abstractmethod
    def get_by_id(self, product_type_id: str) -> ProductType | None:
        """Return a product type by its ID, or None."""

    @abstractmethod
    def get_by_slug(self, slug: str) -> ProductType | None:
        """Return a product type by its slug, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> ProductType | None:
        """Return a product type by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[ProductType]:
        """Return every product type."""

    @abstractmethod
    def save(self, product_type: ProductType) -> None:
        """Persist a new or updated product type."""
