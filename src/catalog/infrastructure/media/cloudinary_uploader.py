"""Cloudinary implementation of MediaUploader.

Uploads go through the official ``cloudinary`` SDK, which signs the
request with the account credentials passed in here.
"""

from __future__ import annotations

from pathlib import Path

import cloudinary.exceptions
import cloudinary.uploader
import structlog

from catalog.domain.exceptions import ConfigurationError, MediaUploadError
from catalog.domain.service.media_uploader import MediaUploader, UploadResult

logger = structlog.get_logger(__name__)


class CloudinaryUploader(MediaUploader):

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout: float = 60,
    ) -> None:
        if not (cloud_name and api_key and api_secret):
            raise ConfigurationError(
                "CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and "
                "CLOUDINARY_API_SECRET must all be set to upload images"
            )
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }
        self._timeout = timeout

    def upload(
        self,
        file_path: Path,
        folder: str = "products",
        tags: list[str] | None = None,
    ) -> UploadResult:
        options = dict(
            self._credentials,
            folder=folder,
            resource_type="image",
            timeout=self._timeout,
        )
        if tags:
            options["tags"] = list(tags)

        try:
            body = cloudinary.uploader.upload(str(file_path), **options)
        except cloudinary.exceptions.Error as exc:
            logger.error("image_upload_failed", file=str(file_path), error=str(exc))
            raise MediaUploadError(f"Failed to upload image to Cloudinary: {exc}") from exc

        return UploadResult(
            public_id=body["public_id"],
            url=body["url"],
            secure_url=body["secure_url"],
            width=body.get("width"),
            height=body.get("height"),
            format=body.get("format"),
            bytes=body.get("bytes"),
        )
