"""CLI command for uploading crop images."""

from __future__ import annotations

import mimetypes
from pathlib import Path

import click

from norifarm.application.upload_image import UploadImageHandler
from norifarm.domain.exceptions import DomainException
from norifarm.infrastructure.bootstrap import image_storage


@click.command("upload")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--content-type", default=None, help="Override the guessed MIME type.")
def image_upload(path: Path, content_type: str | None) -> None:
    """Store an image file and print its URL."""
    content_type = content_type or mimetypes.guess_type(path.name)[0] or ""
    handler = UploadImageHandler(storage=image_storage())

    try:
        url = handler.handle(path.read_bytes(), content_type, path.name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(url)
