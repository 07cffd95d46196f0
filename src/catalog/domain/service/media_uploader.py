"""Abstract media host used to store product and brand images.

The catalog only keeps the returned URLs; the files themselves live
with the remote host.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadResult:
    public_id: str
    url: str
    secure_url: str
    width: int | None = None
    height: int | None = None
    format: str | None = None
    bytes: int | None = None


class MediaUploader(ABC):

    @abstractmethod
    def upload(
        self,
        file_path: Path,
        folder: str = "products",
        tags: list[str] | None = None,
    ) -> UploadResult:
        """Upload an image file and return where it can be fetched from.

        Raises MediaUploadError if the remote host rejects the file.
        """
