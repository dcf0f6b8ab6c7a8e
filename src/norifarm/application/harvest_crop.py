"""Application service: Harvest Crop use case.

A harvest produces an ephemeral HarvestEvent for the caller and restarts
the crop's growth cycle.  The event itself is not stored.
"""

from __future__ import annotations

import structlog

from norifarm.domain.exceptions import NotReadyError
from norifarm.domain.model.crop import HarvestEvent
from norifarm.domain.repository.crop_repository import CropRepository
from norifarm.domain.service.clock import Clock, utcnow
from norifarm.domain.service.random_source import RandomSource

logger = structlog.get_logger(__name__)

YIELD_VARIANCE = 1.0
MIN_QUALITY_SCORE = 80.0
MAX_QUALITY_SCORE = 100.0


class HarvestCropHandler:

    def __init__(
        self,
        crop_repo: CropRepository,
        random_source: RandomSource,
        clock: Clock = utcnow,
    ) -> None:
        self._crop_repo = crop_repo
        self._random = random_source
        self._clock = clock

    def handle(self, crop_id: str, user_id: str = "1") -> HarvestEvent:
        crop = self._crop_repo.get_by_id(crop_id)
        if crop is None:
            logger.warning("harvest_rejected", crop_id=crop_id, reason="missing")
            raise NotReadyError(f"Crop '{crop_id}' is not ready for harvest")

        now = self._clock()
        event = HarvestEvent(
            id=self._random.new_id("harvest"),
            crop_id=crop.id,
            harvested_at=now,
            yield_amount=crop.expected_yield
            + self._random.uniform(-YIELD_VARIANCE, YIELD_VARIANCE),
            quality_score=self._random.uniform(MIN_QUALITY_SCORE, MAX_QUALITY_SCORE),
            user_id=user_id,
        )

        try:
            crop.harvest(event.yield_amount, now)
        except NotReadyError:
            logger.warning(
                "harvest_rejected",
                crop_id=crop.id,
                reason="not_ready",
                maturity=round(crop.maturity_level, 1),
            )
            raise
        self._crop_repo.save(crop)

        logger.info(
            "crop_harvested",
            crop_id=crop.id,
            yield_amount=round(event.yield_amount, 2),
            quality_score=round(event.quality_score, 1),
        )
        return event
