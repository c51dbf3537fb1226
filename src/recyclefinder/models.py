"""Typed result models for recyclefinder."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class BoundingBox:
    """Rectangular search region in WGS84 degrees."""

    south: float
    north: float
    west: float
    east: float

    @classmethod
    def from_strings(cls, values) -> "BoundingBox":
        """
        Build from Nominatim's ``boundingbox`` array.

        Nominatim returns ``[south, north, west, east]`` as decimal strings.
        Raises ValueError unless exactly four numeric values are given.
        """
        parts = list(values)
        if len(parts) != 4:
            raise ValueError(f"expected 4 bounding box values, got {len(parts)}")
        south, north, west, east = (float(p) for p in parts)
        return cls(south=south, north=north, west=west, east=east)

    def to_dict(self) -> dict:
        return {
            "south": self.south,
            "north": self.north,
            "west": self.west,
            "east": self.east,
        }


@dataclass(frozen=True)
class GeocodedLocation:
    """A place name resolved to coordinates."""

    latitude: float
    longitude: float
    display_name: str
    bounding_box: Optional[BoundingBox] = None

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "display_name": self.display_name,
            "bounding_box": (
                self.bounding_box.to_dict() if self.bounding_box else None
            ),
        }


@dataclass(frozen=True)
class RecyclingCenter:
    """One recycling amenity found by the spatial query."""

    id: str
    name: str
    address: str
    distance_km: float                   # rounded to 0.1 km; 999 if unknown
    latitude: Optional[float] = None     # WGS84
    longitude: Optional[float] = None    # WGS84
    materials: Optional[tuple[str, ...]] = None  # None means not tagged
    hours: Optional[str] = None
    phone: Optional[str] = None

    def accepts(self, tag: str) -> bool:
        """
        True if this center plausibly takes material *tag*.

        *tag* is an OSM suffix such as 'scrap_metal'; it is compared with
        the display names ('Scrap Metal') case-insensitively. Centers
        without material information are assumed to accept common
        materials.
        """
        if not self.materials:
            return True
        needle = tag.replace("_", " ").lower()
        return any(needle in material.lower() for material in self.materials)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "distance_km": self.distance_km,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "materials": list(self.materials) if self.materials else None,
            "hours": self.hours,
            "phone": self.phone,
        }


@dataclass(frozen=True)
class SearchLimits:
    """
    Result caps and radius policy for center searches.

    A bounding-box search is capped at *bbox_result_cap*; a radius search
    is capped at *radius_result_cap* and widens the requested radius by
    *radius_multiplier*.
    """

    radius_result_cap: int = 15
    bbox_result_cap: int = 30
    radius_multiplier: float = 2.0

    def __post_init__(self):
        if self.radius_result_cap < 0 or self.bbox_result_cap < 0:
            raise ValueError("result caps must be non-negative")
        if self.radius_multiplier <= 0:
            raise ValueError("radius_multiplier must be positive")

    @classmethod
    def legacy_radius(cls) -> "SearchLimits":
        """Plain radius search: no widening, 15 results."""
        return cls(radius_result_cap=15, bbox_result_cap=30, radius_multiplier=1.0)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a place-name search; *location* is None when not found."""

    location: Optional[GeocodedLocation]
    centers: tuple[RecyclingCenter, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.location is not None

    def to_dict(self) -> dict:
        return {
            "location": self.location.to_dict() if self.location else None,
            "centers": [c.to_dict() for c in self.centers],
        }
