"""Crop aggregate — the core of the domain.

A crop matures over wall-clock time between ``planted_at`` and
``harvest_at``.  ``maturity_level`` and ``is_ready`` are derived values:
they are stored for display but always recomputed via ``refresh()``
before anyone relies on them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from norifarm.domain.exceptions import NotReadyError, ValidationError


class CropType(Enum):
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    GRAIN = "grain"
    HERB = "herb"


class Rarity(Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_EXPECTED_YIELD = 1
MAX_EXPECTED_YIELD = 100
MIN_GROWTH_DAYS = 1
MAX_GROWTH_DAYS = 1500
PLACEHOLDER_IMAGE_URL = "/placeholder.svg?height=200&width=200"

DEFAULT_GROWTH_DAYS = {
    CropType.VEGETABLE: 75,
    CropType.FRUIT: 120,
    CropType.GRAIN: 100,
    CropType.HERB: 45,
}


def compute_maturity(planted_at: datetime, harvest_at: datetime, now: datetime) -> float:
    """Percentage of the growth window that has elapsed, clamped to 0..100.

    A zero-length window means the crop is ready as soon as it is planted.
    """
    window = (harvest_at - planted_at).total_seconds()
    elapsed = (now - planted_at).total_seconds()
    if window <= 0:
        return 100.0 if elapsed >= 0 else 0.0
    return min(100.0, max(0.0, elapsed / window * 100))


@dataclass
class HarvestEvent:
    """Audit record returned by a harvest.  Never persisted."""

    id: str
    crop_id: str
    harvested_at: datetime
    yield_amount: float
    quality_score: float
    user_id: str


@dataclass
class Crop:
    """Aggregate root for a planted crop.

    Use ``Crop.plant()`` for new crops — it enforces all input rules.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted crops without re-validating.
    """

    id: str
    name: str
    type: CropType
    planted_at: datetime
    harvest_at: datetime
    image_url: str
    description: str
    expected_yield: float
    rarity: Rarity
    maturity_level: float = 0.0
    is_ready: bool = False
    nft_token_id: str | None = None
    actual_yield: float | None = None

    # --- Factory (used for NEW crops only) ------------------------------------

    @staticmethod
    def plant(
        *,
        crop_id: str,
        name: str,
        type: str,
        description: str,
        rarity: str,
        expected_yield: float,
        growth_duration: int | None,
        now: datetime,
        nft_token_id: str,
        image_url: str | None = None,
    ) -> Crop:
        """Create a freshly planted crop, enforcing all invariants."""
        errors = _attribute_errors(name, type, description, rarity, expected_yield)

        if growth_duration is None:
            if "type" not in errors:
                growth_duration = DEFAULT_GROWTH_DAYS[CropType(type)]
        elif not MIN_GROWTH_DAYS <= growth_duration <= MAX_GROWTH_DAYS:
            errors["growth_duration"] = (
                f"Growth duration must be between {MIN_GROWTH_DAYS} "
                f"and {MAX_GROWTH_DAYS} days"
            )

        if errors:
            raise ValidationError(_summarize(errors), errors)

        return Crop(
            id=crop_id,
            name=name.strip(),
            type=CropType(type),
            planted_at=now,
            harvest_at=now + timedelta(days=growth_duration),
            image_url=image_url or PLACEHOLDER_IMAGE_URL,
            description=description.strip(),
            expected_yield=expected_yield,
            rarity=Rarity(rarity),
            nft_token_id=nft_token_id,
        )

    # --- State transitions ----------------------------------------------------

    def refresh(self, now: datetime) -> Crop:
        """Recompute ``maturity_level`` and ``is_ready`` for *now*."""
        self.maturity_level = compute_maturity(self.planted_at, self.harvest_at, now)
        self.is_ready = self.maturity_level >= 100
        return self

    def harvest(self, actual_yield: float, now: datetime) -> None:
        """Record the yield and start a new growth cycle of the same length.

        Moving the window keeps the crop at 0% maturity after the next
        ``refresh()``; the crop stays on the farm.
        """
        self.refresh(now)
        if not self.is_ready:
            raise NotReadyError(f"Crop '{self.name}' is not ready for harvest")
        window = self.harvest_at - self.planted_at
        self.actual_yield = actual_yield
        self.planted_at = now
        self.harvest_at = now + window
        self.refresh(now)

    def apply_edit(
        self,
        *,
        name: str,
        type: str,
        description: str,
        rarity: str,
        expected_yield: float,
        image_url: str,
        planted_at: datetime,
        harvest_at: datetime,
        nft_token_id: str | None,
        now: datetime,
    ) -> None:
        """Replace every mutable field at once, then recompute derived state."""
        errors = _attribute_errors(name, type, description, rarity, expected_yield)
        if harvest_at < planted_at:
            errors["harvest_at"] = "Harvest date cannot be before the planting date"
        if errors:
            raise ValidationError(_summarize(errors), errors)

        self.name = name.strip()
        self.type = CropType(type)
        self.description = description.strip()
        self.rarity = Rarity(rarity)
        self.expected_yield = expected_yield
        self.image_url = image_url or PLACEHOLDER_IMAGE_URL
        self.planted_at = planted_at
        self.harvest_at = harvest_at
        if nft_token_id:
            self.nft_token_id = nft_token_id
        self.refresh(now)

    def copy(self) -> Crop:
        return replace(self)

    # --- Computed properties --------------------------------------------------

    @property
    def growth_days(self) -> int:
        return (self.harvest_at - self.planted_at).days

    @property
    def is_growing(self) -> bool:
        return not self.is_ready and self.maturity_level > 0


# --- Internal helpers ---------------------------------------------------------


def _attribute_errors(
    name: str,
    type: str,
    description: str,
    rarity: str,
    expected_yield: float,
) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not name or not name.strip():
        errors["name"] = "Crop name is required"
    if not type:
        errors["type"] = "Crop type is required"
    elif type not in {t.value for t in CropType}:
        errors["type"] = f"Unknown crop type '{type}'"
    if not description or not description.strip():
        errors["description"] = "Description is required"
    if not rarity:
        errors["rarity"] = "Rarity is required"
    elif rarity not in {r.value for r in Rarity}:
        errors["rarity"] = f"Unknown rarity '{rarity}'"
    if expected_yield is None or not (
        MIN_EXPECTED_YIELD <= expected_yield <= MAX_EXPECTED_YIELD
    ):
        errors["expected_yield"] = (
            f"Expected yield must be between {MIN_EXPECTED_YIELD} "
            f"and {MAX_EXPECTED_YIELD}"
        )
    return errors


def _summarize(errors: dict[str, str]) -> str:
    return "Invalid crop: " + "; ".join(
        f"{field}: {message}" for field, message in errors.items()
    )
