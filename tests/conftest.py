"""Shared test fixtures: a fake OpenStreetMap backed by httpx.MockTransport."""

import httpx
import pytest

from helpers import NOMINATIM_URL, OVERPASS_URL, USER_AGENT, FakeOSM, run


@pytest.fixture()
def osm() -> FakeOSM:
    return FakeOSM()


@pytest.fixture()
def http_client(osm: FakeOSM):
    client = httpx.AsyncClient(transport=httpx.MockTransport(osm.handler))
    yield client
    run(client.aclose())


@pytest.fixture()
def session(http_client):
    from recyclefinder._http import _HttpSession

    return _HttpSession(user_agent=USER_AGENT, client=http_client)


@pytest.fixture()
def finder(http_client):
    """Create a RecyclingFinder wired to the fake services."""
    from recyclefinder import RecyclingFinder

    return RecyclingFinder(
        user_agent=USER_AGENT,
        nominatim_url=NOMINATIM_URL,
        overpass_url=OVERPASS_URL,
        http_client=http_client,
    )
