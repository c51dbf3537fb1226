"""Tests for recyclefinder.models module."""

import dataclasses

import pytest

from recyclefinder.models import (
    BoundingBox,
    GeocodedLocation,
    RecyclingCenter,
    SearchLimits,
    SearchResult,
)


def _center(**overrides):
    values = dict(id="1", name="X", address="Address unavailable", distance_km=1.0)
    values.update(overrides)
    return RecyclingCenter(**values)


class TestBoundingBox:
    def test_from_strings(self):
        box = BoundingBox.from_strings(["39.70", "39.90", "-89.75", "-89.55"])
        assert box == BoundingBox(south=39.7, north=39.9, west=-89.75, east=-89.55)

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            BoundingBox.from_strings(["1", "2", "3"])

    def test_not_numeric(self):
        with pytest.raises(ValueError):
            BoundingBox.from_strings(["a", "b", "c", "d"])


class TestRecyclingCenter:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            _center().name = "Y"

    def test_accepts_without_materials(self):
        assert _center().accepts("glass")

    def test_accepts_substring_case_insensitive(self):
        center = _center(materials=("Glass Bottles",))
        assert center.accepts("glass")
        assert not center.accepts("paper")

    def test_to_dict(self):
        d = _center(materials=("Glass",), hours="24/7").to_dict()
        assert d["materials"] == ["Glass"]
        assert d["hours"] == "24/7"
        assert set(d) == {
            "id", "name", "address", "distance_km", "latitude",
            "longitude", "materials", "hours", "phone",
        }


class TestSearchLimits:
    def test_defaults(self):
        limits = SearchLimits()
        assert limits.radius_result_cap == 15
        assert limits.bbox_result_cap == 30
        assert limits.radius_multiplier == 2.0

    def test_legacy_radius(self):
        assert SearchLimits.legacy_radius().radius_multiplier == 1.0

    def test_rejects_negative_cap(self):
        with pytest.raises(ValueError):
            SearchLimits(radius_result_cap=-1)

    def test_rejects_zero_multiplier(self):
        with pytest.raises(ValueError):
            SearchLimits(radius_multiplier=0)


class TestSearchResult:
    def test_not_found(self):
        result = SearchResult(location=None)
        assert not result.found
        assert result.to_dict() == {"location": None, "centers": []}

    def test_found(self):
        location = GeocodedLocation(39.8, -89.6, "Springfield, IL, USA")
        result = SearchResult(location=location, centers=(_center(),))
        assert result.found
        d = result.to_dict()
        assert d["location"]["display_name"] == "Springfield, IL, USA"
        assert d["location"]["bounding_box"] is None
        assert len(d["centers"]) == 1


class TestAccepts:
    def test_multiword_tag(self):
        assert _center(materials=("Scrap Metal",)).accepts("scrap_metal")

    def test_metal_does_not_match_glass(self):
        assert not _center(materials=("Scrap Metal",)).accepts("glass")
