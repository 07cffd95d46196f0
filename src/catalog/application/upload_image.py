"""Application service: Upload Image use case.

Checks the file locally before handing it to the media host, so
obviously bad uploads never leave the machine.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from catalog.application.dto import UploadedImageDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.service.media_uploader import MediaUploader

logger = structlog.get_logger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp", ".svg"}
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
DEFAULT_FOLDER = "products"


class UploadImageHandler:

    def __init__(self, uploader: MediaUploader) -> None:
        self._uploader = uploader

    def handle(
        self,
        file_path: Path,
        folder: str | None = None,
        tags: list[str] | str | None = None,
    ) -> UploadedImageDTO:
        """Upload one image.

        Args:
            file_path: Local image file.
            folder: Remote folder, ``products`` by default.
            tags: A list of tags or a comma-separated string.
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise ValidationError(f"No image file found at '{file_path}'")
        if file_path.suffix.lower() not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                "Invalid file type. Only JPEG, PNG, GIF, WebP, and SVG images are allowed."
            )
        if file_path.stat().st_size > MAX_FILE_SIZE:
            raise ValidationError("Image file cannot exceed 10MB")

        result = self._uploader.upload(
            file_path,
            folder=folder or DEFAULT_FOLDER,
            tags=_parse_tags(tags),
        )
        logger.info("image_uploaded", public_id=result.public_id, folder=folder or DEFAULT_FOLDER)

        return UploadedImageDTO(
            public_id=result.public_id,
            url=result.url,
            secure_url=result.secure_url,
            width=result.width,
            height=result.height,
            format=result.format,
            bytes=result.bytes,
        )


def _parse_tags(tags: list[str] | str | None) -> list[str]:
    if not tags:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    return [t.strip() for t in tags if t.strip()]
