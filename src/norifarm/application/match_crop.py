"""Application service: Match Crop use case (query).

Takes a consistent snapshot of both collections and hands them to the
pure matcher.  Lookup misses propagate as EntityNotFoundError subclasses.
"""

from __future__ import annotations

import structlog

from norifarm.domain.exceptions import EntityNotFoundError
from norifarm.domain.repository.crop_repository import CropRepository
from norifarm.domain.repository.product_repository import ProductRepository
from norifarm.domain.service.clock import Clock, utcnow
from norifarm.domain.service.crop_matcher import (
    DEFAULT_SHOP_BASE_URL,
    MatchResult,
    match_crop_to_product,
)

logger = structlog.get_logger(__name__)


class MatchCropHandler:

    def __init__(
        self,
        crop_repo: CropRepository,
        product_repo: ProductRepository,
        clock: Clock = utcnow,
        shop_base_url: str = DEFAULT_SHOP_BASE_URL,
    ) -> None:
        self._crop_repo = crop_repo
        self._product_repo = product_repo
        self._clock = clock
        self._shop_base_url = shop_base_url

    def handle(self, query: str) -> MatchResult:
        crops = self._crop_repo.list_all()
        products = self._product_repo.list_all()

        try:
            result = match_crop_to_product(
                query, crops, products, self._clock(), self._shop_base_url
            )
        except EntityNotFoundError as exc:
            logger.info("crop_match_missed", query=query, reason=str(exc))
            raise

        logger.info(
            "crop_matched",
            query=query,
            crop_id=result.crop_details.id,
            product=result.matched_product.title,
            all_matches=result.all_matches,
        )
        return result
