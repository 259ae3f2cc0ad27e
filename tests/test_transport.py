from __future__ import annotations

from typing import Any

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as AppServer

from zonewatch._transport import HttpTransport
from zonewatch.config import ZoneWatchConfig
from zonewatch.exceptions import ZoneWatchTransportError


def _app(received: list[Any]) -> web.Application:
    async def zones(_request: web.Request) -> web.Response:
        return web.json_response({"type": "FeatureCollection", "features": []})

    async def broken(_request: web.Request) -> web.Response:
        return web.Response(status=500, text="no se pudo leer zones.geojson")

    async def not_json(_request: web.Request) -> web.Response:
        return web.Response(status=200, text="<html>")

    async def sms(request: web.Request) -> web.Response:
        received.append((request.content_type, await request.json()))
        return web.json_response({"status": "enviado"})

    async def reset(_request: web.Request) -> web.Response:
        received.append("reset")
        return web.Response(status=204)

    async def reset_broken(_request: web.Request) -> web.Response:
        return web.Response(status=405)

    app = web.Application()
    app.router.add_get("/api/zones_geojson", zones)
    app.router.add_get("/api/broken", broken)
    app.router.add_get("/api/not_json", not_json)
    app.router.add_post("/api/sms", sms)
    app.router.add_post("/api/reset", reset)
    app.router.add_post("/api/reset_broken", reset_broken)
    return app


@pytest.mark.asyncio
async def test_request_json_round_trip() -> None:
    received: list[Any] = []
    async with AppServer(_app(received)) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(ZoneWatchConfig(base_url=str(server.make_url("/"))), session)

        assert await transport.request_json("GET", "/api/zones_geojson") == {
            "type": "FeatureCollection",
            "features": [],
        }
        body = {"zona": "Zona Sur", "texto": "río desbordado"}
        assert await transport.request_json("POST", "/api/sms", json_body=body) == {"status": "enviado"}

    assert received == [("application/json", body)]


@pytest.mark.asyncio
async def test_non_2xx_raises_with_body_as_message() -> None:
    async with AppServer(_app([])) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(ZoneWatchConfig(base_url=str(server.make_url("/"))), session)

        with pytest.raises(ZoneWatchTransportError) as exc_info:
            await transport.request_json("GET", "/api/broken")

    exc = exc_info.value
    assert str(exc) == "no se pudo leer zones.geojson"
    assert exc.status_code == 500
    assert exc.endpoint == "/api/broken"


@pytest.mark.asyncio
async def test_invalid_json_raises() -> None:
    async with AppServer(_app([])) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(ZoneWatchConfig(base_url=str(server.make_url("/"))), session)

        with pytest.raises(ZoneWatchTransportError, match="Invalid JSON"):
            await transport.request_json("GET", "/api/not_json")


@pytest.mark.asyncio
async def test_empty_success_body_returns_none() -> None:
    received: list[Any] = []
    async with AppServer(_app(received)) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(ZoneWatchConfig(base_url=str(server.make_url("/"))), session)
        assert await transport.request_json("POST", "/api/reset") is None


@pytest.mark.asyncio
async def test_send_returns_status_without_raising() -> None:
    received: list[Any] = []
    async with AppServer(_app(received)) as server, aiohttp.ClientSession() as session:
        transport = HttpTransport(ZoneWatchConfig(base_url=str(server.make_url("/"))), session)

        assert await transport.send("POST", "/api/reset") == 204
        assert await transport.send("POST", "/api/reset_broken") == 405

    assert received == ["reset"]


@pytest.mark.asyncio
async def test_connection_failure_is_transport_error() -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(ZoneWatchConfig(base_url="http://127.0.0.1:1", request_timeout=2.0), session)

        with pytest.raises(ZoneWatchTransportError, match="failed") as exc_info:
            await transport.request_json("GET", "/api/alerts")
        assert exc_info.value.status_code is None

        with pytest.raises(ZoneWatchTransportError):
            await transport.send("POST", "/api/reset")
