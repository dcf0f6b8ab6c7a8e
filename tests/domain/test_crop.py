"""Unit tests for the Crop aggregate and maturity computation."""

from datetime import timedelta

import pytest

from norifarm.domain.exceptions import NotReadyError, ValidationError
from norifarm.domain.model.crop import (
    PLACEHOLDER_IMAGE_URL,
    Crop,
    CropType,
    Rarity,
    compute_maturity,
)
from tests.fakes import T0, make_crop


def _plant(**overrides) -> Crop:
    kwargs = dict(
        crop_id="c1",
        name="Golden Corn",
        type="grain",
        description="Sweet corn",
        rarity="rare",
        expected_yield=10,
        growth_duration=10,
        now=T0,
        nft_token_id="NFT123",
    )
    kwargs.update(overrides)
    return Crop.plant(**kwargs)


class TestComputeMaturity:

    def test_halfway(self):
        assert compute_maturity(T0, T0 + timedelta(days=10), T0 + timedelta(days=5)) == 50.0

    def test_clamped_below_zero(self):
        assert compute_maturity(T0, T0 + timedelta(days=10), T0 - timedelta(days=1)) == 0.0

    def test_clamped_above_hundred(self):
        assert compute_maturity(T0, T0 + timedelta(days=10), T0 + timedelta(days=30)) == 100.0

    def test_monotonic_in_now(self):
        harvest = T0 + timedelta(days=7)
        levels = [
            compute_maturity(T0, harvest, T0 + timedelta(hours=h))
            for h in range(-24, 24 * 9, 6)
        ]
        assert levels == sorted(levels)
        assert all(0 <= level <= 100 for level in levels)

    def test_zero_window_is_instantly_ready(self):
        assert compute_maturity(T0, T0, T0) == 100.0

    def test_zero_window_before_planting(self):
        assert compute_maturity(T0, T0, T0 - timedelta(seconds=1)) == 0.0


class TestPlant:

    def test_sets_timestamps_and_defaults(self):
        crop = _plant()
        assert crop.planted_at == T0
        assert crop.harvest_at == T0 + timedelta(days=10)
        assert crop.maturity_level == 0
        assert crop.is_ready is False
        assert crop.type == CropType.GRAIN
        assert crop.rarity == Rarity.RARE
        assert crop.nft_token_id == "NFT123"
        assert crop.image_url == PLACEHOLDER_IMAGE_URL

    def test_strips_name_and_description(self):
        crop = _plant(name="  Corn  ", description=" tall ")
        assert crop.name == "Corn"
        assert crop.description == "tall"

    def test_default_growth_duration_by_type(self):
        crop = _plant(type="herb", growth_duration=None)
        assert crop.growth_days == 45

    def test_zero_yield_and_duration_cites_both_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            _plant(expected_yield=0, growth_duration=0)
        assert set(exc_info.value.errors) == {"expected_yield", "growth_duration"}

    def test_reports_every_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            _plant(name=" ", type="", description="", rarity="")
        assert set(exc_info.value.errors) == {"name", "type", "description", "rarity"}

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError, match="Unknown crop type"):
            _plant(type="mushroom")

    def test_growth_duration_upper_bound(self):
        assert _plant(growth_duration=1500).growth_days == 1500
        with pytest.raises(ValidationError, match="Growth duration"):
            _plant(growth_duration=1501)

    def test_yield_bounds_inclusive(self):
        assert _plant(expected_yield=1).expected_yield == 1
        assert _plant(expected_yield=100).expected_yield == 100
        with pytest.raises(ValidationError, match="Expected yield"):
            _plant(expected_yield=101)


class TestRefresh:

    def test_ready_iff_full_maturity(self):
        crop = make_crop(days=10)
        crop.refresh(T0 + timedelta(days=9))
        assert crop.is_ready is False
        crop.refresh(T0 + timedelta(days=10))
        assert crop.maturity_level == 100
        assert crop.is_ready is True

    def test_stored_values_are_not_trusted(self):
        crop = make_crop(days=10)
        crop.maturity_level = 100
        crop.is_ready = True
        crop.refresh(T0 + timedelta(days=1))
        assert crop.maturity_level == pytest.approx(10.0)
        assert crop.is_ready is False


class TestHarvest:

    def test_harvest_resets_growth_cycle(self):
        crop = make_crop(days=10)
        now = T0 + timedelta(days=12)
        crop.harvest(9.5, now)
        assert crop.actual_yield == 9.5
        assert crop.maturity_level == 0
        assert crop.is_ready is False
        assert crop.planted_at == now
        assert crop.harvest_at == now + timedelta(days=10)

    def test_harvest_not_ready_rejected(self):
        crop = make_crop(days=10)
        with pytest.raises(NotReadyError):
            crop.harvest(9.5, T0 + timedelta(days=3))
        assert crop.actual_yield is None


class TestApplyEdit:

    def _edit(self, crop: Crop, **overrides) -> None:
        kwargs = dict(
            name=crop.name,
            type=crop.type.value,
            description=crop.description,
            rarity=crop.rarity.value,
            expected_yield=crop.expected_yield,
            image_url=crop.image_url,
            planted_at=crop.planted_at,
            harvest_at=crop.harvest_at,
            nft_token_id=crop.nft_token_id,
            now=T0 + timedelta(days=5),
        )
        kwargs.update(overrides)
        crop.apply_edit(**kwargs)

    def test_recomputes_derived_fields(self):
        crop = make_crop(days=10)
        self._edit(crop, harvest_at=T0 + timedelta(days=5))
        assert crop.is_ready is True

    def test_harvest_before_planting_rejected(self):
        crop = make_crop(days=10)
        with pytest.raises(ValidationError) as exc_info:
            self._edit(crop, harvest_at=T0 - timedelta(days=1))
        assert "harvest_at" in exc_info.value.errors

    def test_invalid_edit_leaves_crop_untouched(self):
        crop = make_crop(days=10)
        with pytest.raises(ValidationError):
            self._edit(crop, name="", expected_yield=0)
        assert crop.name == "Golden Corn"
        assert crop.expected_yield == 10

    def test_keeps_token_when_none_given(self):
        crop = make_crop(nft_token_id="NFT555")
        self._edit(crop, nft_token_id=None)
        assert crop.nft_token_id == "NFT555"
