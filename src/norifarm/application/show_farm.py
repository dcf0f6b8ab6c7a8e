"""Application service: Show Farm / Show Crop use cases (queries)."""

from __future__ import annotations

from norifarm.application.dto import FarmOverviewDTO
from norifarm.domain.exceptions import EntityNotFoundError
from norifarm.domain.model.crop import Crop
from norifarm.domain.repository.crop_repository import CropRepository
from norifarm.domain.service.clock import Clock, utcnow


class ShowFarmHandler:

    def __init__(self, crop_repo: CropRepository, clock: Clock = utcnow) -> None:
        self._crop_repo = crop_repo
        self._clock = clock

    def handle(self) -> FarmOverviewDTO:
        now = self._clock()
        crops = [crop.refresh(now) for crop in self._crop_repo.list_all()]
        return FarmOverviewDTO(
            crops=crops,
            ready=[c for c in crops if c.is_ready],
            growing=[c for c in crops if c.is_growing],
        )


class ShowCropHandler:

    def __init__(self, crop_repo: CropRepository, clock: Clock = utcnow) -> None:
        self._crop_repo = crop_repo
        self._clock = clock

    def handle(self, crop_id: str) -> Crop:
        crop = self._crop_repo.get_by_id(crop_id)
        if crop is None:
            raise EntityNotFoundError(f"Crop '{crop_id}' not found")
        return crop.refresh(self._clock())
