"""ProductType aggregate: a kind of product such as shoes or t-shirts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Slug

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ProductType:

    id: str
    name: str
    slug: Slug
    description: str = ""
    is_active: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        slug: str | None = None,
        description: str = "",
        is_active: bool = True,
    ) -> ProductType:
        name = _clean_name(name)
        return cls(
            id=id,
            name=name,
            slug=Slug.of(slug) if slug else Slug.from_name(name),
            description=_clean_description(description),
            is_active=is_active,
        )

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)
        self._touch()

    def change_slug(self, slug: str) -> None:
        self.slug = Slug.of(slug)
        self._touch()

    def describe(self, description: str) -> None:
        self.description = _clean_description(description)
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def _touch(self) -> None:
        self.updated_at = _now()


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product type name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")
    return name


def _clean_description(description: str | None) -> str:
    if description is not None and not isinstance(description, str):
        raise ValidationError("Description must be a string")
    description = (description or "").strip()
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
        )
    return description
