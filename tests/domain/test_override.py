"""Unit tests for merging baseline crops with overrides and user crops."""

from norifarm.domain.model.override import Tombstone, Upsert, merge_crops
from tests.fakes import make_crop


def _ids(crops):
    return [c.id for c in crops]


class TestMergeCrops:

    def test_baseline_then_user_crops(self):
        merged = merge_crops(
            [make_crop(id="b1"), make_crop(id="b2")],
            [],
            [make_crop(id="u1")],
        )
        assert _ids(merged) == ["b1", "b2", "u1"]

    def test_upsert_replaces_in_place(self):
        edited = make_crop(id="b1", name="Renamed")
        merged = merge_crops(
            [make_crop(id="b1"), make_crop(id="b2")],
            [Upsert(edited)],
            [],
        )
        assert _ids(merged) == ["b1", "b2"]
        assert merged[0].name == "Renamed"

    def test_upsert_with_new_id_appends_before_user_crops(self):
        merged = merge_crops(
            [make_crop(id="b1")],
            [Upsert(make_crop(id="x"))],
            [make_crop(id="u1")],
        )
        assert _ids(merged) == ["b1", "x", "u1"]

    def test_tombstone_removes_baseline(self):
        merged = merge_crops(
            [make_crop(id="b1"), make_crop(id="b2")],
            [Tombstone("b1")],
            [],
        )
        assert _ids(merged) == ["b2"]

    def test_later_override_wins(self):
        merged = merge_crops(
            [make_crop(id="b1")],
            [Upsert(make_crop(id="b1", name="Edited")), Tombstone("b1")],
            [],
        )
        assert merged == []

    def test_tombstone_for_unknown_id_ignored(self):
        merged = merge_crops([make_crop(id="b1")], [Tombstone("zzz")], [])
        assert _ids(merged) == ["b1"]
