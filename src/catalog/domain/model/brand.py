"""Brand aggregate.

Products reference a brand by id only; the brand never knows which
products point at it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Slug

MAX_NAME_LENGTH = 100
MAX_TEXT_LENGTH = 500


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Brand:
    """A manufacturer or label (e.g. Nike, Adidas)."""

    id: str
    name: str
    slug: Slug
    description: str = ""
    logo: str = ""
    website: str = ""
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
        logo: str = "",
        website: str = "",
        is_active: bool = True,
    ) -> Brand:
        name = _clean_name(name)
        return cls(
            id=id,
            name=name,
            slug=Slug.of(slug) if slug else Slug.from_name(name),
            description=_clean_text("Description", description),
            logo=_clean_text("Logo URL", logo),
            website=_clean_website(website),
            is_active=is_active,
        )

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)
        self._touch()

    def change_slug(self, slug: str) -> None:
        self.slug = Slug.of(slug)
        self._touch()

    def describe(self, description: str) -> None:
        self.description = _clean_text("Description", description)
        self._touch()

    def change_logo(self, logo: str) -> None:
        self.logo = _clean_text("Logo URL", logo)
        self._touch()

    def change_website(self, website: str) -> None:
        self.website = _clean_website(website)
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
        raise ValidationError("Brand name is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")
    return name


def _clean_text(label: str, value: str | None) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{label} must be a string")
    value = (value or "").strip()
    if len(value) > MAX_TEXT_LENGTH:
        raise ValidationError(f"{label} cannot exceed {MAX_TEXT_LENGTH} characters")
    return value


def _clean_website(website: str | None) -> str:
    website = _clean_text("Website URL", website)
    if website and not website.startswith(("http://", "https://")):
        raise ValidationError(
            "Website must be a valid URL starting with http:// or https://"
        )
    return website
