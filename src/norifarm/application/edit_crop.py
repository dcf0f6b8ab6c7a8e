"""Application service: Edit Crop use case."""

from __future__ import annotations

import structlog

from norifarm.application.dto import EditCropSpec
from norifarm.domain.exceptions import EntityNotFoundError
from norifarm.domain.model.crop import Crop
from norifarm.domain.repository.crop_repository import CropRepository
from norifarm.domain.service.clock import Clock, utcnow
from norifarm.domain.service.random_source import RandomSource

logger = structlog.get_logger(__name__)


class EditCropHandler:

    def __init__(
        self,
        crop_repo: CropRepository,
        random_source: RandomSource,
        clock: Clock = utcnow,
    ) -> None:
        self._crop_repo = crop_repo
        self._random = random_source
        self._clock = clock

    def handle(self, crop_id: str, spec: EditCropSpec) -> Crop:
        """Replace a crop's editable fields.

        The NFT token is kept when the edit omits it; a crop that never
        had one gets a new token.
        """
        crop = self._crop_repo.get_by_id(crop_id)
        if crop is None:
            raise EntityNotFoundError(f"Crop '{crop_id}' not found")

        token = spec.nft_token_id or crop.nft_token_id or self._random.nft_token_id()

        crop.apply_edit(
            name=spec.name,
            type=spec.type,
            description=spec.description,
            rarity=spec.rarity,
            expected_yield=spec.expected_yield,
            image_url=spec.image_url,
            planted_at=spec.planted_at,
            harvest_at=spec.harvest_at,
            nft_token_id=token,
            now=self._clock(),
        )
        self._crop_repo.save(crop)

        logger.info("crop_edited", crop_id=crop.id, maturity=round(crop.maturity_level, 1))
        return crop
