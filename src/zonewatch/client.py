"""High-level async client keeping a zone map and alert feed in sync."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import aiohttp
from pydantic import TypeAdapter

from zonewatch._constants import IMPORT_ZONES_ENDPOINT, ZONE_STATUSES_ENDPOINT
from zonewatch._transport import HttpTransport, Transport
from zonewatch.config import ZoneWatchConfig
from zonewatch.exceptions import ClientNotStartedError, ZoneWatchError, ZoneWatchTransportError
from zonewatch.models.zone import ZoneCollection
from zonewatch.page import PageShell
from zonewatch.render.engine import GeoJsonLayer, MapEngine, MapHandle
from zonewatch.sync.actions import reset_zones, submit_message
from zonewatch.sync.alerts import refresh_alerts
from zonewatch.sync.context import SyncContext
from zonewatch.sync.scheduler import RefreshScheduler
from zonewatch.sync.zones import load_zones

_logger = logging.getLogger(__name__)

_ZONE_STATUSES = TypeAdapter(dict[str, str])


class ZoneWatchClient:
    """Async client for a zone-monitoring server.

    Usage::

        async with ZoneWatchClient(config, map_engine=MemoryMapEngine()) as client:
            await client.start()
            await client.submit_message("Zona Norte", "lluvia intensa")

    ``start`` renders immediately and then every ``config.poll_interval``
    seconds until the block exits. Without a map engine the alert feed
    still refreshes but zone updates are skipped.
    """

    def __init__(
        self,
        config: ZoneWatchConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        map_engine: MapEngine | None = None,
        page: PageShell | None = None,
    ) -> None:
        self._config = config if config is not None else ZoneWatchConfig.from_env()
        self._external_session = session is not None
        self._http_session = session
        self._map_engine = map_engine
        self._page = page if page is not None else PageShell()
        self._context: SyncContext | None = None
        self._scheduler: RefreshScheduler | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ZoneWatchClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        transport = HttpTransport(self._config, self._http_session)
        self._context = SyncContext(config=self._config, transport=transport, page=self._page)
        self._scheduler = RefreshScheduler(
            (self.refresh_alerts, self.load_zones),
            period=self._config.poll_interval,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._scheduler is not None:
            await self._scheduler.stop()
            self._scheduler = None
        if self._context is not None:
            self._context.teardown()
            self._context = None
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_context(self) -> SyncContext:
        if self._context is None:
            raise ClientNotStartedError("Client not initialized. Use 'async with ZoneWatchClient(...) as client:'")
        return self._context

    def _require_scheduler(self) -> RefreshScheduler:
        if self._scheduler is None:
            raise ClientNotStartedError("Client not initialized. Use 'async with ZoneWatchClient(...) as client:'")
        return self._scheduler

    @property
    def _transport(self) -> Transport:
        return self._require_context().transport

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> ZoneWatchConfig:
        return self._config

    @property
    def page(self) -> PageShell:
        return self._page

    @property
    def map(self) -> MapHandle | None:
        return self._context.map if self._context is not None else None

    @property
    def layer(self) -> GeoJsonLayer | None:
        return self._context.layer if self._context is not None else None

    @property
    def scheduler(self) -> RefreshScheduler:
        return self._require_scheduler()

    # ------------------------------------------------------------------
    # Refresh loop
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Create the map (if an engine is available) and start polling."""
        context = self._require_context()
        scheduler = self._require_scheduler()
        context.init_map(self._map_engine)
        scheduler.start()

    async def stop(self) -> None:
        """Stop polling. Rendered state stays as it is."""
        if self._scheduler is not None:
            await self._scheduler.stop()

    async def load_zones(self) -> bool:
        return await load_zones(self._require_context())

    async def refresh_alerts(self) -> bool:
        return await refresh_alerts(self._require_context())

    async def refresh_all(self) -> None:
        """Run one out-of-band tick and wait for both refreshes."""
        tasks = self._require_scheduler().tick()
        await asyncio.gather(*tasks)

    # ------------------------------------------------------------------
    # Write actions
    # ------------------------------------------------------------------

    async def submit_message(
        self,
        zona: str | None = None,
        texto: str | None = None,
        *,
        on_error: Callable[[ZoneWatchError], None] | None = None,
    ) -> bool:
        """Submit the message form.

        Values passed here are written into the form fields first, as if
        typed; ``None`` keeps the current field value.
        """
        form = self._page.form
        if zona is not None:
            form.zona = zona
        if texto is not None:
            form.texto = texto
        return await submit_message(self._require_context(), self._require_scheduler(), on_error=on_error)

    async def reset(self) -> None:
        await reset_zones(self._require_context())

    # ------------------------------------------------------------------
    # Other server endpoints
    # ------------------------------------------------------------------

    async def get_zone_statuses(self) -> dict[str, str]:
        """Zone name to status color, as currently held by the server."""
        payload = await self._transport.request_json("GET", ZONE_STATUSES_ENDPOINT)
        if payload is None:
            return {}
        try:
            return _ZONE_STATUSES.validate_python(payload)
        except ValueError as exc:
            raise ZoneWatchTransportError(
                f"Unexpected zone status payload: {exc}",
                endpoint=ZONE_STATUSES_ENDPOINT,
            ) from exc

    async def import_zones(self, collection: ZoneCollection | dict[str, Any]) -> None:
        """Upload a zone FeatureCollection to the server's zone store."""
        if isinstance(collection, dict):
            collection = ZoneCollection.model_validate(collection)
        await self._transport.request_json("POST", IMPORT_ZONES_ENDPOINT, json_body=collection.to_geojson())
