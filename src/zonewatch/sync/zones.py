"""Zone layer reconciliation.

The first successful load builds the layer and frames the viewport on it.
Every later load clears the layer and refills it in place, leaving the
viewport (and whatever the user did with it) alone.
"""

from __future__ import annotations

import functools
import logging

from pydantic import ValidationError

from zonewatch._constants import ZONES_GEOJSON_ENDPOINT
from zonewatch.exceptions import InvalidBoundsError, ZoneWatchError
from zonewatch.models.zone import ZoneCollection
from zonewatch.styling import popup_for, style_for
from zonewatch.sync.context import SyncContext

_logger = logging.getLogger(__name__)


def apply_zones(ctx: SyncContext, collection: ZoneCollection) -> bool:
    """Render *collection* into the context's layer.

    Returns ``True`` when this call bound the layer (first load).
    """
    handle = ctx.map
    if handle is None:
        return False

    if ctx.layer is not None:
        ctx.layer.clear_layers()
        ctx.layer.add_data(collection)
        return False

    popup = functools.partial(popup_for, escape=ctx.config.escape_popup_html)
    layer = handle.add_geojson_layer(collection, style=style_for, popup=popup)
    ctx.layer = layer
    padding = (ctx.config.fit_padding, ctx.config.fit_padding)
    try:
        handle.fit_bounds(layer.get_bounds(), padding=padding)
    except (InvalidBoundsError, ValueError):
        _logger.debug("Initial zone layer has no valid bounds; keeping default viewport")
    return True


async def load_zones(ctx: SyncContext) -> bool:
    """Fetch the zone collection and reconcile it into the map.

    Fetch or payload errors are logged and leave the rendered layer as it
    was. Returns whether anything was rendered.
    """
    seq = ctx.sequencer.dispatch(ZONES_GEOJSON_ENDPOINT)
    try:
        payload = await ctx.transport.request_json("GET", ZONES_GEOJSON_ENDPOINT)
        collection = ZoneCollection.model_validate(payload)
    except (ZoneWatchError, ValidationError) as exc:
        _logger.error("loadZones failed: %s", exc)
        return False

    if ctx.map is None:
        return False

    if ctx.config.discard_stale_responses and not ctx.sequencer.accept(ZONES_GEOJSON_ENDPOINT, seq):
        _logger.debug("Dropping stale zone response #%d", seq)
        return False

    apply_zones(ctx, collection)
    return True
