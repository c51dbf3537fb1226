"""RecyclingFinder client, the main entry point for the library."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from recyclefinder import materials
from recyclefinder._http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, _HttpSession
from recyclefinder.geocoder import NOMINATIM_SEARCH_URL, Geocoder
from recyclefinder.models import (
    BoundingBox,
    GeocodedLocation,
    RecyclingCenter,
    SearchLimits,
    SearchResult,
)
from recyclefinder.overpass import (
    DEFAULT_RADIUS_METERS,
    OVERPASS_INTERPRETER_URL,
    OverpassFinder,
)

logger = logging.getLogger(__name__)


class RecyclingFinder:
    """
    Finds recycling centers near a place, optionally by material.

    Holds one HTTP client shared by the geocoder and the center finder.
    Use as an async context manager, or call ``close()`` when done.

    An *http_client* passed in is used as-is: its own timeout applies
    and *timeout* is ignored. It is left open by ``close()``.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        nominatim_url: str = NOMINATIM_SEARCH_URL,
        overpass_url: str = OVERPASS_INTERPRETER_URL,
        limits: Optional[SearchLimits] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._session = _HttpSession(user_agent, timeout, http_client)
        self.geocoder = Geocoder(self._session, url=nominatim_url)
        self.finder = OverpassFinder(self._session, url=overpass_url, limits=limits)

    # ── Public API ────────────────────────────────────────────────

    async def geocode(self, place_name: str) -> Optional[GeocodedLocation]:
        """Resolve *place_name*; None if the place is unknown."""
        return await self.geocoder.geocode(place_name)

    async def find_nearby(
        self,
        latitude: float,
        longitude: float,
        radius_meters: float = DEFAULT_RADIUS_METERS,
        bounding_box: Optional[BoundingBox] = None,
    ) -> list[RecyclingCenter]:
        """All recycling centers near the point, nearest first."""
        return await self.finder.find_nearby(
            latitude, longitude, radius_meters, bounding_box
        )

    async def find_by_material(
        self,
        latitude: float,
        longitude: float,
        category: str,
        radius_meters: float = DEFAULT_RADIUS_METERS,
        bounding_box: Optional[BoundingBox] = None,
    ) -> list[RecyclingCenter]:
        """
        Recycling centers near the point that accept *category*.

        *category* is a human label such as "Metal" or an OSM tag such as
        "scrap_metal"; "any" disables filtering. Centers with no material
        tags are kept. Raises CenterLookupFailure from the underlying search.
        """
        tag = materials.normalize_material_type(category)
        centers = await self.find_nearby(
            latitude, longitude, radius_meters, bounding_box
        )
        if tag == materials.ANY_MATERIAL:
            return centers

        kept = [c for c in centers if c.accepts(tag)]
        logger.debug(
            "Material filter %r kept %d of %d centers", tag, len(kept), len(centers)
        )
        return kept

    async def search(
        self,
        place_name: str,
        category: str = materials.ANY_MATERIAL,
        radius_meters: float = DEFAULT_RADIUS_METERS,
    ) -> SearchResult:
        """
        Geocode *place_name*, then search around it.

        The place's bounding box is searched when the geocoder supplies
        one. Returns a SearchResult whose location is None if the place
        was not found. Raises GeocodingFailure or CenterLookupFailure.
        """
        location = await self.geocode(place_name)
        if location is None:
            return SearchResult(location=None)

        centers = await self.find_by_material(
            location.latitude,
            location.longitude,
            category,
            radius_meters,
            location.bounding_box,
        )
        return SearchResult(location=location, centers=tuple(centers))

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._session.close()

    async def __aenter__(self) -> RecyclingFinder:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
