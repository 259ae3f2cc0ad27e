"""HTTP transport for the zone-monitoring server's JSON API."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from zonewatch._constants import USER_AGENT
from zonewatch.config import ZoneWatchConfig
from zonewatch.exceptions import ZoneWatchTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the sync functions.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(self, method: str, endpoint: str, *, json_body: Any = None) -> Any:
        ...

    async def send(self, method: str, endpoint: str) -> int:
        ...


class HttpTransport:
    """aiohttp-backed transport.

    ``request_json`` fails with the response body as message on any
    non-2xx status and otherwise returns the decoded JSON body.
    """

    def __init__(self, config: ZoneWatchConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _url(self, endpoint: str) -> str:
        return f"{self._config.base_url}{endpoint}"

    async def request_json(self, method: str, endpoint: str, *, json_body: Any = None) -> Any:
        headers: dict[str, str] = {"accept": "application/json", "user-agent": USER_AGENT}
        data: str | None = None
        if json_body is not None:
            headers["content-type"] = "application/json"
            data = json.dumps(json_body)

        url = self._url(endpoint)
        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, data=data, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise ZoneWatchTransportError(text, status_code=resp.status, endpoint=endpoint)
        except ZoneWatchTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ZoneWatchTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        # 204 and friends
        if not text.strip():
            return None

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ZoneWatchTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=resp.status,
                endpoint=endpoint,
            ) from exc

    async def send(self, method: str, endpoint: str) -> int:
        """Issue a body-less request and return the status without checking it."""
        url = self._url(endpoint)
        _logger.debug("%s %s", method, url)
        try:
            async with self._http.request(
                method, url, headers={"user-agent": USER_AGENT}, timeout=self._timeout
            ) as resp:
                await resp.read()
                return resp.status
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ZoneWatchTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
