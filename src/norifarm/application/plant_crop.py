"""Application service: Plant Crop use case."""

from __future__ import annotations

import structlog

from norifarm.application.dto import PlantCropSpec
from norifarm.domain.model.crop import Crop
from norifarm.domain.repository.crop_repository import CropRepository
from norifarm.domain.service.clock import Clock, utcnow
from norifarm.domain.service.random_source import RandomSource

logger = structlog.get_logger(__name__)


class PlantCropHandler:

    def __init__(
        self,
        crop_repo: CropRepository,
        random_source: RandomSource,
        clock: Clock = utcnow,
    ) -> None:
        self._crop_repo = crop_repo
        self._random = random_source
        self._clock = clock

    def handle(self, spec: PlantCropSpec) -> Crop:
        """Plant a new crop.  Nothing is stored if validation fails."""
        crop = Crop.plant(
            crop_id=self._random.new_id("crop"),
            name=spec.name,
            type=spec.type,
            description=spec.description,
            rarity=spec.rarity,
            expected_yield=spec.expected_yield,
            growth_duration=spec.growth_duration,
            image_url=spec.image_url,
            now=self._clock(),
            nft_token_id=self._random.nft_token_id(),
        )
        self._crop_repo.save(crop)

        logger.info(
            "crop_planted",
            crop_id=crop.id,
            name=crop.name,
            type=crop.type.value,
            growth_days=crop.growth_days,
        )
        return crop
