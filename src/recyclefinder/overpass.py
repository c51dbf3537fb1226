"""Recycling amenity search via the OpenStreetMap Overpass API."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import httpx

from recyclefinder import geo
from recyclefinder._http import _HttpSession
from recyclefinder.exceptions import CenterLookupFailure
from recyclefinder.materials import format_material_name
from recyclefinder.models import BoundingBox, RecyclingCenter, SearchLimits

logger = logging.getLogger(__name__)

OVERPASS_INTERPRETER_URL = "https://overpass-api.de/api/interpreter"
DEFAULT_RADIUS_METERS = 10000

UNKNOWN_DISTANCE_KM = 999.0
UNNAMED_CENTER = "Unnamed Recycling Center"
NO_ADDRESS = "Address unavailable"

_ELEMENT_KINDS = ("node", "way", "relation")
_LOCATED_KINDS = ("node", "way")
_ADDRESS_KEYS = ("housenumber", "street", "city", "postcode")
_RECYCLING_PREFIX = "recycling:"


def build_query(
    latitude: float,
    longitude: float,
    radius_meters: float = DEFAULT_RADIUS_METERS,
    bounding_box: Optional[BoundingBox] = None,
    radius_multiplier: float = 1.0,
) -> str:
    """
    Build an Overpass QL query for recycling amenities.

    With a *bounding_box* the whole box is searched and the point and
    radius are ignored. Otherwise a circle of
    ``radius_meters * radius_multiplier`` around the point is searched.
    """
    if bounding_box is not None:
        b = bounding_box
        area = f"({b.south},{b.west},{b.north},{b.east})"
    else:
        radius = _format_number(radius_meters * radius_multiplier)
        area = f"(around:{radius},{latitude},{longitude})"

    lines = ["[out:json];", "("]
    lines += [f'  {kind}["amenity"="recycling"]{area};' for kind in _ELEMENT_KINDS]
    lines += [");", "out center;"]
    return "\n".join(lines)


def parse_elements(
    elements: Iterable[Any], latitude: float, longitude: float
) -> list[RecyclingCenter]:
    """
    Convert raw Overpass elements to centers, in input order.

    Relations and elements without an id are dropped. Elements with no
    usable coordinate are kept with a distance of 999 km.
    """
    centers = []
    for element in elements:
        if not isinstance(element, dict):
            continue
        if element.get("type") not in _LOCATED_KINDS:
            continue
        if element.get("id") is None:
            continue
        centers.append(_to_center(element, latitude, longitude))
    return centers


def _to_center(
    element: dict[str, Any], latitude: float, longitude: float
) -> RecyclingCenter:
    tags = element.get("tags") or {}
    lat, lon = _element_position(element)
    if lat is None or lon is None:
        distance = UNKNOWN_DISTANCE_KM
    else:
        distance = geo.distance_km(latitude, longitude, lat, lon)

    materials = [
        format_material_name(key[len(_RECYCLING_PREFIX):])
        for key, value in tags.items()
        if key.startswith(_RECYCLING_PREFIX) and value == "yes"
    ]

    return RecyclingCenter(
        id=str(element["id"]),
        name=tags.get("name") or UNNAMED_CENTER,
        address=_format_address(tags),
        distance_km=round(distance, 1),
        latitude=lat,
        longitude=lon,
        materials=tuple(materials) if materials else None,
        hours=tags.get("opening_hours"),
        phone=tags.get("phone") or tags.get("contact:phone"),
    )


def _element_position(
    element: dict[str, Any],
) -> tuple[Optional[float], Optional[float]]:
    """Own lat/lon for nodes, the computed center for ways."""
    lat, lon = element.get("lat"), element.get("lon")
    if lat is None or lon is None:
        center = element.get("center") or {}
        lat, lon = center.get("lat"), center.get("lon")
    if lat is None or lon is None:
        return None, None
    return float(lat), float(lon)


def _format_address(tags: dict[str, str]) -> str:
    parts = []
    for key in _ADDRESS_KEYS:
        value = tags.get(key) or tags.get(f"addr:{key}")
        if value:
            parts.append(value)
    return ", ".join(parts) or NO_ADDRESS


def _format_number(value: float) -> str:
    """Render 20000.0 as '20000' but keep real fractions."""
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


class OverpassFinder:
    """Finds recycling centers near a point or inside a bounding box."""

    def __init__(
        self,
        session: Optional[_HttpSession] = None,
        url: str = OVERPASS_INTERPRETER_URL,
        limits: Optional[SearchLimits] = None,
    ):
        self._session = session or _HttpSession()
        self._url = url
        self.limits = limits or SearchLimits()

    async def find_nearby(
        self,
        latitude: float,
        longitude: float,
        radius_meters: float = DEFAULT_RADIUS_METERS,
        bounding_box: Optional[BoundingBox] = None,
    ) -> list[RecyclingCenter]:
        """
        Return recycling centers sorted by distance from the point.

        Centers without a coordinate come last regardless of distance.

        The list is capped at ``limits.bbox_result_cap`` for a bounding-box
        search and ``limits.radius_result_cap`` otherwise.
        Raises CenterLookupFailure if the request fails or the response
        cannot be understood. An empty result is not an error.
        """
        query = build_query(
            latitude,
            longitude,
            radius_meters,
            bounding_box,
            radius_multiplier=self.limits.radius_multiplier,
        )
        logger.debug("Overpass query near (%s, %s):\n%s", latitude, longitude, query)

        try:
            data = await self._session.post_form_json(self._url, {"data": query})
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Overpass request failed: %s", exc)
            raise CenterLookupFailure(latitude, longitude, str(exc)) from exc

        if not isinstance(data, dict):
            raise CenterLookupFailure(
                latitude, longitude, f"unexpected response type {type(data).__name__}"
            )
        elements = data.get("elements") or []
        if not isinstance(elements, list):
            raise CenterLookupFailure(latitude, longitude, "'elements' is not a list")

        try:
            centers = parse_elements(elements, latitude, longitude)
        except (AttributeError, TypeError, ValueError) as exc:
            raise CenterLookupFailure(
                latitude, longitude, f"malformed element: {exc}"
            ) from exc
        # unknown geometry ranks last even past real centers beyond 999 km
        centers.sort(key=lambda c: (c.latitude is None, c.distance_km))

        if bounding_box is not None:
            cap = self.limits.bbox_result_cap
        else:
            cap = self.limits.radius_result_cap
        logger.debug("Found %d centers, returning at most %d", len(centers), cap)
        return centers[:cap]
