"""Application service: Upload Crop Image use case."""

from __future__ import annotations

import structlog

from norifarm.domain.exceptions import ValidationError
from norifarm.domain.repository.image_storage import ImageStorage

logger = structlog.get_logger(__name__)


class UploadImageHandler:

    def __init__(self, storage: ImageStorage) -> None:
        self._storage = storage

    def handle(self, data: bytes, content_type: str, original_name: str) -> str:
        """Store an image and return its public URL."""
        try:
            url = self._storage.store(data, content_type, original_name)
        except ValidationError as exc:
            logger.warning(
                "image_rejected",
                original_name=original_name,
                content_type=content_type,
                size=len(data),
                reason=str(exc),
            )
            raise
        logger.info("image_stored", url=url, size=len(data))
        return url
