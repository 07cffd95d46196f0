"""Product aggregate and the color/size stock model.

A product owns an ordered list of color variants; each color variant
owns an ordered list of size variants, and each size variant carries
a stock count. The whole tree is persisted inline with the product.

Stock only ever changes through ``Product.update_stock`` so the
non-negativity invariant is enforced in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import InsufficientStockError, ValidationError
from catalog.domain.model.value_objects import (
    Gender,
    Money,
    Rating,
    Size,
    parse_size,
)

MAX_NAME_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SizeVariant:
    """Stock count for one size of one color."""

    size: Size
    stock: int = 0

    def __post_init__(self) -> None:
        self.size = parse_size(self.size)
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError("Stock must be an integer")
        if self.stock < 0:
            raise ValidationError("Stock cannot be negative")


@dataclass
class ColorVariant:
    """A color of a product with its sizes and color-specific images."""

    color: str
    sizes: list[SizeVariant] = field(default_factory=list)
    images: list[str] = field(default_factory=list)

    def find_size(self, size: Size) -> SizeVariant | None:
        for size_variant in self.sizes:
            if size_variant.size == size:
                return size_variant
        return None


@dataclass
class Product:
    """Aggregate root for a catalog product.

    Invariants:
    - every ``SizeVariant.stock`` is >= 0
    - colors are unique within ``variants`` (exact, case-sensitive match)
    - sizes are unique within a color (type and value must both match)

    ``version`` is an optimistic concurrency token; repositories
    compare it on save and bump it on success.
    """

    id: str
    name: str
    brand_id: str
    product_type_id: str
    category: str
    price: Money
    variants: list[ColorVariant] = field(default_factory=list)
    gender: Gender = Gender.UNISEX
    description: str = ""
    discount_price: Money | None = None
    images: list[str] = field(default_factory=list)
    is_active: bool = True
    rating: Rating = field(default_factory=Rating)
    version: int = 0
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory --------------------------------------------------------------

    @classmethod
    def create(
        cls,
        id: str,
        name: str,
        brand_id: str,
        product_type_id: str,
        category: str,
        price: Money,
        variants: list[ColorVariant],
        gender: Gender = Gender.UNISEX,
        description: str = "",
        discount_price: Money | None = None,
        images: list[str] | None = None,
    ) -> Product:
        """Build a new product, validating every boundary rule."""
        product = cls(
            id=id,
            name=_clean_name(name),
            brand_id=brand_id,
            product_type_id=product_type_id,
            category=_clean_category(category),
            price=price,
            gender=gender,
            description=_clean_description(description),
            discount_price=discount_price,
            images=_clean_images(images),
        )
        product.replace_variants(variants)
        return product

    # --- Stock ----------------------------------------------------------------

    def update_stock(self, color: str, size: Size | int | str, quantity: int) -> None:
        """Apply a signed stock delta to one color/size slot.

        Missing color and size nodes are appended (stock starting at 0).
        Raises InsufficientStockError if the result would be negative;
        in that case nothing on the product changes.
        """
        if not isinstance(color, str) or not color:
            raise ValidationError("Color is required and must be a string")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError("Quantity must be an integer")
        size = parse_size(size)

        color_variant = self.find_color(color)
        size_variant = color_variant.find_size(size) if color_variant else None

        current_stock = size_variant.stock if size_variant else 0
        new_stock = current_stock + quantity
        if new_stock < 0:
            raise InsufficientStockError(color, size, current_stock, quantity)

        if color_variant is None:
            color_variant = ColorVariant(color=color)
            self.variants.append(color_variant)
        if size_variant is None:
            size_variant = SizeVariant(size=size)
            color_variant.sizes.append(size_variant)

        size_variant.stock = new_stock
        self._touch()

    def find_color(self, color: str) -> ColorVariant | None:
        for color_variant in self.variants:
            if color_variant.color == color:
                return color_variant
        return None

    @property
    def total_stock(self) -> int:
        return sum(
            size_variant.stock
            for color_variant in self.variants
            for size_variant in color_variant.sizes
        )

    @property
    def in_stock(self) -> bool:
        return any(
            size_variant.stock > 0
            for color_variant in self.variants
            for size_variant in color_variant.sizes
        )

    def stock_by_size(self, size: Size | int | str) -> int:
        """Units of *size* across every color."""
        size = parse_size(size)
        total = 0
        for color_variant in self.variants:
            size_variant = color_variant.find_size(size)
            if size_variant is not None:
                total += size_variant.stock
        return total

    # --- Details --------------------------------------------------------------

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)
        self._touch()

    def describe(self, description: str) -> None:
        self.description = _clean_description(description)
        self._touch()

    def recategorize(self, category: str) -> None:
        self.category = _clean_category(category)
        self._touch()

    def set_gender(self, gender: Gender) -> None:
        self.gender = gender
        self._touch()

    def update_price(self, new_price: Money, discount_price: Money | None = None) -> None:
        """Change the list price and, optionally, the discount price."""
        self.price = new_price
        if discount_price is not None:
            self.discount_price = discount_price
        self._touch()

    def assign_brand(self, brand_id: str) -> None:
        self.brand_id = brand_id
        self._touch()

    def assign_product_type(self, product_type_id: str) -> None:
        self.product_type_id = product_type_id
        self._touch()

    def replace_images(self, images: list[str]) -> None:
        self.images = _clean_images(images)
        self._touch()

    def replace_variants(self, variants: list[ColorVariant]) -> None:
        """Swap in a whole new variants tree.

        This bypasses ``update_stock`` so the tree is re-validated here.
        """
        validate_variants(variants)
        self.variants = list(variants)
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def _touch(self) -> None:
        self.updated_at = _now()


def validate_variants(variants: list[ColorVariant]) -> None:
    """Boundary rules for a full variants tree."""
    if not variants:
        raise ValidationError("At least one color variant is required")

    seen_colors: list[str] = []
    for color_variant in variants:
        color = color_variant.color
        if not isinstance(color, str) or not color.strip():
            raise ValidationError("Color is required")
        if color in seen_colors:
            raise ValidationError(f'Duplicate color "{color}" in variants')
        seen_colors.append(color)

        if not color_variant.sizes:
            raise ValidationError(
                f'At least one size variant is required for color "{color}"'
            )
        seen_sizes: list[Size] = []
        for size_variant in color_variant.sizes:
            if size_variant.size in seen_sizes:
                raise ValidationError(
                    f'Sizes must be unique within a color: "{color}" '
                    f"has size {size_variant.size} more than once"
                )
            seen_sizes.append(size_variant.size)


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
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


def _clean_category(category: str) -> str:
    if not isinstance(category, str) or not category.strip():
        raise ValidationError("Category is required")
    return category.strip()


def _clean_images(images: list[str] | None) -> list[str]:
    if images is None:
        return []
    if not isinstance(images, list) or not all(isinstance(i, str) for i in images):
        raise ValidationError("Images must be a list of URLs")
    return list(images)
