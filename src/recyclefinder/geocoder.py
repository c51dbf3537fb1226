"""Place name to coordinate resolution via OpenStreetMap Nominatim."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from recyclefinder._http import _HttpSession
from recyclefinder.exceptions import GeocodingFailure
from recyclefinder.models import BoundingBox, GeocodedLocation

logger = logging.getLogger(__name__)

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
_ACCEPT_LANGUAGE = "en-US,en;q=0.9"


class Geocoder:
    """Resolves free-text place names with a single Nominatim query."""

    def __init__(
        self,
        session: Optional[_HttpSession] = None,
        url: str = NOMINATIM_SEARCH_URL,
    ):
        self._session = session or _HttpSession()
        self._url = url

    async def geocode(self, place_name: str) -> Optional[GeocodedLocation]:
        """
        Look up *place_name* and return its best match.

        Returns None when the service knows no such place.
        Raises GeocodingFailure if the request fails or the response
        cannot be understood. Failures are not retried.
        """
        params = {"q": place_name, "format": "json", "limit": 1}
        logger.debug("Geocoding %r via %s", place_name, self._url)
        try:
            data = await self._session.get_json(
                self._url,
                params=params,
                headers={"Accept-Language": _ACCEPT_LANGUAGE},
            )
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Geocoding request for %r failed: %s", place_name, exc)
            raise GeocodingFailure(place_name, str(exc)) from exc

        if not data:
            logger.debug("No geocoding match for %r", place_name)
            return None

        try:
            return _parse_match(data[0], place_name)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Unexpected geocoding response for %r: %s", place_name, exc)
            raise GeocodingFailure(place_name, f"malformed response: {exc}") from exc


def _parse_match(match: dict[str, Any], place_name: str) -> GeocodedLocation:
    """Build a GeocodedLocation from one Nominatim search hit."""
    bounding_box = None
    raw_box = match.get("boundingbox")
    if raw_box:
        try:
            bounding_box = BoundingBox.from_strings(raw_box)
        except (TypeError, ValueError):
            # callers fall back to a radius search
            logger.debug("Ignoring malformed bounding box %r", raw_box)

    return GeocodedLocation(
        latitude=float(match["lat"]),
        longitude=float(match["lon"]),
        display_name=match.get("display_name") or place_name,
        bounding_box=bounding_box,
    )
