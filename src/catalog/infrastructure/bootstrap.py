"""Composition root: builds the concrete repositories and uploader.

Paths come from ``CatalogConfig.data_dir``; the config is read once per
process (tests call ``config.cache_clear()`` after changing the environment).
"""

from __future__ import annotations

from functools import lru_cache

from catalog.infrastructure.config import CatalogConfig, load_config
from catalog.infrastructure.media.cloudinary_uploader import CloudinaryUploader
from catalog.infrastructure.persistence.json_brand_repository import (
    JsonBrandRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_product_type_repository import (
    JsonProductTypeRepository,
)


@lru_cache(maxsize=1)
def config() -> CatalogConfig:
    return load_config()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(config().data_dir / "products.json")


def brand_repository() -> JsonBrandRepository:
    return JsonBrandRepository(config().data_dir / "brands.json")


def product_type_repository() -> JsonProductTypeRepository:
    return JsonProductTypeRepository(config().data_dir / "product_types.json")


def media_uploader() -> CloudinaryUploader:
    cfg = config()
    return CloudinaryUploader(
        cloud_name=cfg.cloudinary_cloud_name,
        api_key=cfg.cloudinary_api_key,
        api_secret=cfg.cloudinary_api_secret,
    )
