"""Overrides applied on top of the baseline crop catalog.

The baseline catalog is read-only seed data.  Edits to a baseline crop
are recorded as an ``Upsert`` and deletions as a ``Tombstone``; the
merged view is rebuilt from scratch on every read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from norifarm.domain.model.crop import Crop


@dataclass(frozen=True)
class Upsert:
    crop: Crop

    @property
    def crop_id(self) -> str:
        return self.crop.id


@dataclass(frozen=True)
class Tombstone:
    crop_id: str


Override = Union[Upsert, Tombstone]


def merge_crops(
    baseline: list[Crop],
    overrides: list[Override],
    user_crops: list[Crop],
) -> list[Crop]:
    """Baseline, then overrides by id, then every user-created crop.

    An upsert replaces the baseline crop in place (or is appended when
    the id is new); a tombstone drops it.  Baseline order is preserved.
    """
    merged: dict[str, Crop] = {crop.id: crop for crop in baseline}
    for override in overrides:
        if isinstance(override, Tombstone):
            merged.pop(override.crop_id, None)
        else:
            merged[override.crop_id] = override.crop
    return list(merged.values()) + list(user_crops)
