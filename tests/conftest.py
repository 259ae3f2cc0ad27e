from __future__ import annotations

import asyncio
import copy
from dataclasses import dataclass, field
from typing import Any

import pytest

from zonewatch.exceptions import ZoneWatchTransportError


def polygon(name: str | None, status: str | None = None, *, lng: float = -77.03, lat: float = -12.05) -> dict[str, Any]:
    props: dict[str, Any] = {}
    if name is not None:
        props["name"] = name
    if status is not None:
        props["status"] = status
    return {
        "type": "Feature",
        "properties": props,
        "geometry": {
            "type": "Polygon",
            "coordinates": [[[lng, lat], [lng + 0.02, lat], [lng + 0.02, lat + 0.02], [lng, lat + 0.02], [lng, lat]]],
        },
    }


def collection(*features: dict[str, Any]) -> dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}


def alert(
    tipo: str = "lluvia",
    zona: str = "Zona Norte",
    severidad: str = "alta",
    *,
    timestamp: str = "2026-01-01T15:04:05.123456789Z",
    mensaje: str = "Lluvia intensa reportada",
    extracto: str = "",
) -> dict[str, Any]:
    return {
        "id": f"{zona}-{tipo}",
        "zona": zona,
        "tipo": tipo,
        "severidad": severidad,
        "mensaje": mensaje,
        "extracto": extracto,
        "timestamp": timestamp,
    }


@dataclass
class FakeServer:
    """In-process stand-in for the zone-monitoring server's JSON API."""

    zones: dict[str, Any] = field(
        default_factory=lambda: collection(polygon("Zona Norte", "verde"), polygon("Zona Sur", "verde", lat=-12.2))
    )
    alerts: list[dict[str, Any]] = field(default_factory=list)
    statuses: dict[str, str] = field(default_factory=lambda: {"Zona Norte": "verde", "Zona Sur": "verde"})
    failing: set[str] = field(default_factory=set)
    reset_status: int = 204
    calls: list[tuple[str, str, Any]] = field(default_factory=list)
    # (delay seconds, payload) consumed per GET of the endpoint, before falling back to current state
    scripted: dict[str, list[tuple[float, Any]]] = field(default_factory=dict)
    imported: list[dict[str, Any]] = field(default_factory=list)

    def count(self, method: str, endpoint: str) -> int:
        return sum(1 for m, e, _ in self.calls if m == method and e == endpoint)

    def _set_zone_status(self, name: str, status: str) -> None:
        self.statuses[name] = status
        for feature in self.zones.get("features", []):
            if feature["properties"].get("name") == name:
                feature["properties"]["status"] = status

    async def request_json(self, method: str, endpoint: str, *, json_body: Any = None) -> Any:
        self.calls.append((method, endpoint, json_body))
        script = self.scripted.get(endpoint)
        if script:
            delay, payload = script.pop(0)
            await asyncio.sleep(delay)
            return copy.deepcopy(payload)
        if endpoint in self.failing:
            raise ZoneWatchTransportError("boom", status_code=500, endpoint=endpoint)

        if (method, endpoint) == ("GET", "/api/zones_geojson"):
            return copy.deepcopy(self.zones)
        if (method, endpoint) == ("GET", "/api/alerts"):
            return copy.deepcopy(self.alerts)
        if (method, endpoint) == ("GET", "/api/zones"):
            return dict(self.statuses)
        if (method, endpoint) == ("POST", "/api/sms"):
            zona = json_body["zona"]
            self.alerts.insert(0, alert("huayco", zona, "crítica", mensaje=json_body["texto"], extracto="huayco"))
            self._set_zone_status(zona, "rojo")
            return {"status": "enviado"}
        if (method, endpoint) == ("POST", "/api/admin/import_zones"):
            self.imported.append(json_body)
            return None
        raise AssertionError(f"Unexpected request in fake server: {method} {endpoint}")

    async def send(self, method: str, endpoint: str) -> int:
        self.calls.append((method, endpoint, None))
        if endpoint in self.failing:
            raise ZoneWatchTransportError(f"Request to {endpoint} failed: refused", endpoint=endpoint)
        if (method, endpoint) == ("POST", "/api/reset"):
            for name in list(self.statuses):
                self._set_zone_status(name, "verde")
            return self.reset_status
        raise AssertionError(f"Unexpected request in fake server: {method} {endpoint}")


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()
