"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from norifarm.domain.service.random_source import SystemRandomSource
from norifarm.infrastructure.config import get_settings
from norifarm.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from norifarm.infrastructure.persistence.json_crop_repository import (
    JsonCropRepository,
)
from norifarm.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from norifarm.infrastructure.storage.local_image_storage import LocalImageStorage


def crop_repository() -> JsonCropRepository:
    data_dir = get_settings().data_dir
    return JsonCropRepository(
        baseline_path=data_dir / "baseline_crops.json",
        overrides_path=data_dir / "crop_overrides.json",
        user_path=data_dir / "user_crops.json",
    )


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(get_settings().data_dir / "cart.json")


def image_storage() -> LocalImageStorage:
    settings = get_settings()
    return LocalImageStorage(
        uploads_dir=settings.uploads_dir,
        url_prefix=settings.upload_url_prefix,
        max_bytes=settings.max_upload_bytes,
    )


def random_source() -> SystemRandomSource:
    return SystemRandomSource()
