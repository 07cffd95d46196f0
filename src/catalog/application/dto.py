"""Data transfer objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.brand import Brand
from catalog.domain.model.product import ColorVariant, Product, SizeVariant
from catalog.domain.model.product_type import ProductType


# ── Input ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ProductSpec:
    """Input: everything needed to create a product."""

    name: str
    brand_id: str
    product_type_id: str
    category: str
    price: str
    variants: list[dict]
    gender: str = "unisex"
    description: str = ""
    discount_price: str | None = None
    images: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProductChanges:
    """Input: fields to change on a product. ``None`` means unchanged."""

    name: str | None = None
    brand_id: str | None = None
    product_type_id: str | None = None
    category: str | None = None
    price: str | None = None
    discount_price: str | None = None
    gender: str | None = None
    description: str | None = None
    images: list[str] | None = None
    variants: list[dict] | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class ProductQuery:
    """Input: filters, sorting and pagination for listing products."""

    product_type_id: str | None = None
    category: str | None = None
    gender: str | None = None
    brand_id: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    in_stock: bool = False
    search: str | None = None
    sort: str = "-created_at"
    page: int = 1
    limit: int = 10


@dataclass(frozen=True)
class BrandChanges:
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    logo: str | None = None
    website: str | None = None
    is_active: bool | None = None


@dataclass(frozen=True)
class ProductTypeChanges:
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    is_active: bool | None = None


def variants_from_raw(raw: object) -> list[ColorVariant]:
    """Build a variants tree from its JSON shape.

    ``[{"color": "black", "sizes": [{"size": 8, "stock": 10}], "images": []}]``
    """
    if not isinstance(raw, list):
        raise ValidationError("Variants must be a list of color variants")
    variants: list[ColorVariant] = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValidationError("Each color variant must be an object")
        sizes = item.get("sizes")
        if not isinstance(sizes, list):
            raise ValidationError(
                f'Sizes array is required for color "{item.get("color")}"'
            )
        images = item.get("images")
        if images is None:
            images = []
        if not isinstance(images, list) or not all(isinstance(i, str) for i in images):
            raise ValidationError(
                f'Images for color "{item.get("color")}" must be a list of URLs'
            )
        variants.append(
            ColorVariant(
                color=item.get("color"),  # type: ignore[arg-type]
                sizes=[_size_from_raw(s) for s in sizes],
                images=list(images),
            )
        )
    return variants


def _size_from_raw(raw: object) -> SizeVariant:
    if not isinstance(raw, dict) or "size" not in raw:
        raise ValidationError("Size is required")
    if "stock" not in raw:
        raise ValidationError("Stock is required")
    return SizeVariant(size=raw["size"], stock=raw["stock"])


# ── Output ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SizeStockDTO:
    size: int | str
    stock: int


@dataclass(frozen=True)
class ColorVariantDTO:
    color: str
    sizes: list[SizeStockDTO]
    images: list[str]


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user, with stock aggregates."""

    id: str
    name: str
    brand_id: str
    product_type_id: str
    category: str
    gender: str
    description: str
    price: str  # formatted, e.g. "$89.99"
    discount_price: str | None
    variants: list[ColorVariantDTO]
    images: list[str]
    is_active: bool
    rating_average: float
    rating_count: int
    total_stock: int
    in_stock: bool
    version: int
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductPageDTO:
    items: list[ProductDTO]
    page: int
    limit: int
    total: int
    pages: int


@dataclass(frozen=True)
class BulkStockResultDTO:
    """Output: the product after a bulk update plus per-triple outcomes."""

    product: ProductDTO
    updates: list[str]
    errors: list[str]


@dataclass(frozen=True)
class BrandDTO:
    id: str
    name: str
    slug: str
    description: str
    logo: str
    website: str
    is_active: bool


@dataclass(frozen=True)
class ProductTypeDTO:
    id: str
    name: str
    slug: str
    description: str
    is_active: bool


@dataclass(frozen=True)
class UploadedImageDTO:
    public_id: str
    url: str
    secure_url: str
    width: int | None
    height: int | None
    format: str | None
    bytes: int | None


# ── Mapping ──────────────────────────────────────────────────────────────────


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        brand_id=product.brand_id,
        product_type_id=product.product_type_id,
        category=product.category,
        gender=product.gender.value,
        description=product.description,
        price=str(product.price),
        discount_price=str(product.discount_price) if product.discount_price else None,
        variants=[
            ColorVariantDTO(
                color=cv.color,
                sizes=[SizeStockDTO(size=sv.size.to_raw(), stock=sv.stock) for sv in cv.sizes],
                images=list(cv.images),
            )
            for cv in product.variants
        ],
        images=list(product.images),
        is_active=product.is_active,
        rating_average=product.rating.average,
        rating_count=product.rating.count,
        total_stock=product.total_stock,
        in_stock=product.in_stock,
        version=product.version,
        created_at=product.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        updated_at=product.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def to_brand_dto(brand: Brand) -> BrandDTO:
    return BrandDTO(
        id=brand.id,
        name=brand.name,
        slug=str(brand.slug),
        description=brand.description,
        logo=brand.logo,
        website=brand.website,
        is_active=brand.is_active,
    )


def to_product_type_dto(product_type: ProductType) -> ProductTypeDTO:
    return ProductTypeDTO(
        id=product_type.id,
        name=product_type.name,
        slug=str(product_type.slug),
        description=product_type.description,
        is_active=product_type.is_active,
    )
