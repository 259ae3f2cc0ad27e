"""Owning context for the map, the rendered zone layer and the page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zonewatch._transport import Transport
from zonewatch.config import ZoneWatchConfig
from zonewatch.page import PageShell
from zonewatch.render.engine import GeoJsonLayer, MapEngine, MapHandle
from zonewatch.sync.sequencing import ResponseSequencer

_logger = logging.getLogger(__name__)


@dataclass
class SyncContext:
    """State shared by the reconciler, the alert renderer and the actions.

    ``map`` is ``None`` until :meth:`init_map` succeeds (or forever, when no
    engine is available). ``layer`` is ``None`` until the first zone load
    after the map exists; afterwards it is only cleared and repopulated.
    """

    config: ZoneWatchConfig
    transport: Transport
    page: PageShell = field(default_factory=PageShell)
    map: MapHandle | None = None
    layer: GeoJsonLayer | None = None
    sequencer: ResponseSequencer = field(default_factory=ResponseSequencer)

    @property
    def is_bound(self) -> bool:
        return self.layer is not None

    def init_map(self, engine: MapEngine | None) -> MapHandle | None:
        """Create the map at the fallback viewport with its base tile layer."""
        if self.map is not None:
            return self.map
        if engine is None:
            _logger.warning("Map engine not available; zone layer updates are disabled")
            return None
        handle = engine.create_map(self.page.map_element_id)
        handle.set_view(self.config.default_center, self.config.default_zoom)
        handle.add_tile_layer(self.config.tiles)
        self.map = handle
        return handle

    def teardown(self) -> None:
        handle = self.map
        self.map = None
        self.layer = None
        if handle is not None:
            handle.remove()
