"""Fake OpenStreetMap responses and element builders shared by the tests."""

import asyncio
import json

import httpx

NOMINATIM_URL = "https://nominatim.test/search"
OVERPASS_URL = "https://overpass.test/api/interpreter"
USER_AGENT = "recyclefinder-tests/1.0"

SPRINGFIELD = [
    {
        "lat": "39.8",
        "lon": "-89.6",
        "display_name": "Springfield, IL, USA",
        "boundingbox": ["39.70", "39.90", "-89.75", "-89.55"],
    }
]


def node(id, lat, lon, **tags):
    """Build an Overpass node element."""
    return {"type": "node", "id": id, "lat": lat, "lon": lon, "tags": tags}


def way(id, lat, lon, **tags):
    """Build an Overpass way element with a computed center."""
    return {
        "type": "way",
        "id": id,
        "center": {"lat": lat, "lon": lon},
        "tags": tags,
    }


def run(coro):
    return asyncio.run(coro)


class FakeOSM:
    """
    Canned Nominatim and Overpass responses.

    A payload that is a str is sent verbatim (for broken JSON); an
    exception instance is raised from the transport instead.
    """

    def __init__(self):
        self.geocode_payload = SPRINGFIELD
        self.geocode_status = 200
        self.overpass_payload = {"elements": []}
        self.overpass_status = 200
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "nominatim.test":
            return self._respond(request, self.geocode_status, self.geocode_payload)
        if request.url.host == "overpass.test":
            return self._respond(request, self.overpass_status, self.overpass_payload)
        return httpx.Response(404, request=request)

    @staticmethod
    def _respond(request, status, payload) -> httpx.Response:
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, str):
            return httpx.Response(status, text=payload, request=request)
        return httpx.Response(
            status,
            content=json.dumps(payload).encode(),
            headers={"Content-Type": "application/json"},
            request=request,
        )

    def last(self, host: str) -> httpx.Request:
        return [r for r in self.requests if r.url.host == host][-1]
