"""JSON-file-backed implementation of CropRepository.

Three files make up the collection:

- ``baseline``   seed catalog, never written
- ``overrides``  upserts and tombstones applied on top of the baseline
- ``user``       crops planted by the user

Reads merge all three (see ``merge_crops``).  Writes are routed by where
the crop lives: user crops are edited in place, baseline crops get an
override record.  Mutations are serialized with a lock because each one
is a read-modify-write of a whole file.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path

from norifarm.domain.exceptions import PersistenceError
from norifarm.domain.model.crop import Crop, CropType, Rarity
from norifarm.domain.model.override import Override, Tombstone, Upsert, merge_crops
from norifarm.domain.repository.crop_repository import CropRepository


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp; values without an offset are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed

class JsonCropRepository(CropRepository):

    def __init__(
        self,
        baseline_path: Path,
        overrides_path: Path,
        user_path: Path,
    ) -> None:
        self._baseline_path = baseline_path
        self._overrides_path = overrides_path
        self._user_path = user_path
        self._lock = threading.Lock()
        for path in (overrides_path, user_path):
            self._ensure_file(path)

    # --- CropRepository interface ---------------------------------------------

    def get_by_id(self, crop_id: str) -> Crop | None:
        for crop in self.list_all():
            if crop.id == crop_id:
                return crop
        return None

    def list_all(self) -> list[Crop]:
        return merge_crops(
            self._load_baseline(),
            self._load_overrides(),
            [self._to_domain(raw) for raw in self._load_raw(self._user_path)],
        )

    def save(self, crop: Crop) -> None:
        with self._lock:
            user_records = self._load_raw(self._user_path)
            for i, raw in enumerate(user_records):
                if raw["id"] == crop.id:
                    user_records[i] = self._to_raw(crop)
                    self._persist_raw(self._user_path, user_records)
                    return

            if self._in_baseline(crop.id):
                self._write_override(self._to_raw(crop))
                return

            user_records.append(self._to_raw(crop))
            self._persist_raw(self._user_path, user_records)

    def delete(self, crop_id: str) -> None:
        with self._lock:
            user_records = self._load_raw(self._user_path)
            remaining = [raw for raw in user_records if raw["id"] != crop_id]
            if len(remaining) != len(user_records):
                self._persist_raw(self._user_path, remaining)
                return

            if self._in_baseline(crop_id):
                self._write_override({"id": crop_id, "deleted": True})

    # --- Overrides ------------------------------------------------------------

    def _load_overrides(self) -> list[Override]:
        overrides: list[Override] = []
        for raw in self._load_raw(self._overrides_path):
            if raw.get("deleted"):
                overrides.append(Tombstone(raw["id"]))
            else:
                overrides.append(Upsert(self._to_domain(raw)))
        return overrides

    def _write_override(self, record: dict) -> None:
        records = self._load_raw(self._overrides_path)
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self._persist_raw(self._overrides_path, records)

    def _load_baseline(self) -> list[Crop]:
        if not self._baseline_path.exists():
            return []
        return [self._to_domain(raw) for raw in self._load_raw(self._baseline_path)]

    def _in_baseline(self, crop_id: str) -> bool:
        return any(crop.id == crop_id for crop in self._load_baseline())

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(crop: Crop) -> dict:
        return {
            "id": crop.id,
            "name": crop.name,
            "type": crop.type.value,
            "planted_at": crop.planted_at.isoformat(),
            "harvest_at": crop.harvest_at.isoformat(),
            "maturity_level": crop.maturity_level,
            "is_ready": crop.is_ready,
            "nft_token_id": crop.nft_token_id,
            "image_url": crop.image_url,
            "description": crop.description,
            "expected_yield": crop.expected_yield,
            "actual_yield": crop.actual_yield,
            "rarity": crop.rarity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Crop:
        try:
            return Crop(
                id=raw["id"],
                name=raw["name"],
                type=CropType(raw["type"]),
                planted_at=parse_timestamp(raw["planted_at"]),
                harvest_at=parse_timestamp(raw["harvest_at"]),
                image_url=raw.get("image_url", ""),
                description=raw.get("description", ""),
                expected_yield=raw["expected_yield"],
                rarity=Rarity(raw["rarity"]),
                maturity_level=raw.get("maturity_level", 0.0),
                is_ready=raw.get("is_ready", False),
                nft_token_id=raw.get("nft_token_id"),
                actual_yield=raw.get("actual_yield"),
            )
        except (KeyError, ValueError) as exc:
            raise PersistenceError(f"Malformed crop record {raw.get('id')!r}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _load_raw(path: Path) -> list[dict]:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {path}: {exc}") from exc

    @staticmethod
    def _persist_raw(path: Path, records: list[dict]) -> None:
        try:
            path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot write {path}: {exc}") from exc

    @staticmethod
    def _ensure_file(path: Path) -> None:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")
