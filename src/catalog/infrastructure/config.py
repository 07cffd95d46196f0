"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first, so local
settings can live there instead of the shell.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from catalog.domain.exceptions import ConfigurationError

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

_LEVELS_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class CatalogConfig:
    data_dir: Path
    environment: str
    log_level: str
    stock_update_retries: int
    cloudinary_cloud_name: str
    cloudinary_api_key: str
    cloudinary_api_secret: str

    @property
    def is_production(self) -> bool:
        return self.environment in ("production", "staging")


def load_config() -> CatalogConfig:
    load_dotenv(find_dotenv(usecwd=True))

    environment = os.getenv("ENVIRONMENT", "development").strip().lower()
    log_level = os.getenv(
        "LOG_LEVEL", _LEVELS_BY_ENVIRONMENT.get(environment, "INFO")
    ).strip().upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigurationError(f"Invalid LOG_LEVEL: {log_level!r}")

    data_dir = os.getenv("CATALOG_DATA_DIR")

    return CatalogConfig(
        data_dir=Path(data_dir) if data_dir else _PROJECT_ROOT / "data",
        environment=environment,
        log_level=log_level,
        stock_update_retries=_positive_int("STOCK_UPDATE_RETRIES", 3),
        cloudinary_cloud_name=os.getenv("CLOUDINARY_CLOUD_NAME", ""),
        cloudinary_api_key=os.getenv("CLOUDINARY_API_KEY", ""),
        cloudinary_api_secret=os.getenv("CLOUDINARY_API_SECRET", ""),
    )


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1, got {value}")
    return value
