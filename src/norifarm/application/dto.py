"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from norifarm.domain.model.crop import Crop


@dataclass(frozen=True)
class PlantCropSpec:
    """Input: what the user filled in on the planting form."""

    name: str
    type: str
    description: str
    rarity: str
    expected_yield: float
    growth_duration: int | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class EditCropSpec:
    """Input: the complete set of editable crop fields (full replace)."""

    name: str
    type: str
    description: str
    rarity: str
    expected_yield: float
    image_url: str
    planted_at: datetime
    harvest_at: datetime
    nft_token_id: str | None = None

    @staticmethod
    def from_crop(crop: Crop) -> EditCropSpec:
        """Start an edit from a crop's current values."""
        return EditCropSpec(
            name=crop.name,
            type=crop.type.value,
            description=crop.description,
            rarity=crop.rarity.value,
            expected_yield=crop.expected_yield,
            image_url=crop.image_url,
            planted_at=crop.planted_at,
            harvest_at=crop.harvest_at,
            nft_token_id=crop.nft_token_id,
        )


@dataclass(frozen=True)
class FarmOverviewDTO:
    """Output: every crop, plus the ready / still-growing split."""

    crops: list[Crop]
    ready: list[Crop]
    growing: list[Crop]


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "12,900 KRW"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total_items: int
    total_price: str


@dataclass(frozen=True)
class RecommendationDTO:
    crop_type: str
    product_ids: list[str]
    product_names: list[str]
    reason: str
