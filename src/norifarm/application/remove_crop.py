"""Application service: Remove Crop use case."""

from __future__ import annotations

import structlog

from norifarm.domain.exceptions import EntityNotFoundError
from norifarm.domain.repository.crop_repository import CropRepository

logger = structlog.get_logger(__name__)


class RemoveCropHandler:

    def __init__(self, crop_repo: CropRepository) -> None:
        self._crop_repo = crop_repo

    def handle(self, crop_id: str) -> None:
        if self._crop_repo.get_by_id(crop_id) is None:
            raise EntityNotFoundError(f"Crop '{crop_id}' not found")
        self._crop_repo.delete(crop_id)
        logger.info("crop_removed", crop_id=crop_id)
