"""Internal HTTP session management."""

from __future__ import annotations

from typing import Any, Optional

import httpx

DEFAULT_USER_AGENT = "recyclefinder/0.1"
DEFAULT_TIMEOUT = 30.0


class _HttpSession:
    """
    Manages one httpx.AsyncClient with reuse.

    The client is created on first use and kept open so that repeated
    lookups against the same host share pooled connections. A client
    passed in by the caller is used as-is and never closed here.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._user_agent = user_agent
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def get_client(self) -> httpx.AsyncClient:
        """Return an open client, creating one if needed."""
        if self._client is None:
            self._open()
        return self._client

    async def get_json(
        self,
        url: str,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
    ) -> Any:
        """
        GET *url* and decode the JSON body.

        Raises httpx.HTTPError on transport errors or non-2xx status and
        ValueError if the body is not JSON.
        """
        response = await self.get_client().get(
            url, params=params, headers=self._headers(headers)
        )
        response.raise_for_status()
        return response.json()

    async def post_form_json(
        self,
        url: str,
        data: dict,
        headers: Optional[dict] = None,
    ) -> Any:
        """POST *data* form-encoded to *url* and decode the JSON body."""
        response = await self.get_client().post(
            url, data=data, headers=self._headers(headers)
        )
        response.raise_for_status()
        return response.json()

    def _headers(self, extra: Optional[dict]) -> dict:
        headers = {"User-Agent": self._user_agent}
        if extra:
            headers.update(extra)
        return headers

    def _open(self) -> None:
        """Create a fresh client."""
        self._client = httpx.AsyncClient(timeout=self._timeout)
        self._owns_client = True

    async def close(self) -> None:
        """Close the client if this session created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
