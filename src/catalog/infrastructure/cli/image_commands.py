"""CLI commands for image uploads."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.upload_image import UploadImageHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import media_uploader


@click.command("upload")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--folder", default=None, help="Remote folder (default: products).")
@click.option("--tags", default=None, help="Comma-separated tags.")
def image_upload(file_path: Path, folder: str | None, tags: str | None) -> None:
    """Upload an image to the media host and print its URL."""
    try:
        handler = UploadImageHandler(uploader=media_uploader())
        dto = handler.handle(file_path, folder=folder, tags=tags)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Image uploaded successfully")
    click.echo(f"Public ID: {dto.public_id}")
    click.echo(f"URL:       {dto.secure_url}")
