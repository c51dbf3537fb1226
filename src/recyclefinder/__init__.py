"""recyclefinder: find recycling centers near a place via OpenStreetMap."""

from recyclefinder.client import RecyclingFinder
from recyclefinder.exceptions import (
    CenterLookupFailure,
    GeocodingFailure,
    RecycleFinderError,
)
from recyclefinder.geo import distance_km
from recyclefinder.materials import format_material_name, normalize_material_type
from recyclefinder.models import (
    BoundingBox,
    GeocodedLocation,
    RecyclingCenter,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "RecyclingFinder",
    "BoundingBox",
    "GeocodedLocation",
    "RecyclingCenter",
    "SearchLimits",
    "SearchResult",
    "RecycleFinderError",
    "GeocodingFailure",
    "CenterLookupFailure",
    "distance_km",
    "format_material_name",
    "normalize_material_type",
]
