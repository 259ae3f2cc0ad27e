"""User-initiated writes: submit a message, reset zone state."""

from __future__ import annotations

import logging
from collections.abc import Callable

from zonewatch._constants import RESET_ENDPOINT, SMS_ENDPOINT
from zonewatch.exceptions import ZoneWatchError
from zonewatch.sync.context import SyncContext
from zonewatch.sync.scheduler import RefreshScheduler
from zonewatch.sync.zones import load_zones

_logger = logging.getLogger(__name__)


async def submit_message(
    ctx: SyncContext,
    scheduler: RefreshScheduler,
    *,
    on_error: Callable[[ZoneWatchError], None] | None = None,
) -> bool:
    """Send the form's message and schedule an accelerated refresh.

    Whitespace-only text sends nothing. Transport errors propagate unless
    *on_error* is given, in which case they are handed to it instead.
    Returns whether the message was accepted by the server.
    """
    form = ctx.page.form
    zona = form.zona
    texto = form.texto
    if not texto.strip():
        return False

    try:
        await ctx.transport.request_json("POST", SMS_ENDPOINT, json_body={"zona": zona, "texto": texto})
    except ZoneWatchError as exc:
        if on_error is None:
            raise
        on_error(exc)
        return False

    form.texto = ""
    _logger.debug("Message for %r sent; refreshing in %.3fs", zona, ctx.config.accelerated_refresh_delay)
    scheduler.schedule_once(ctx.config.accelerated_refresh_delay)
    return True


async def reset_zones(ctx: SyncContext) -> None:
    """Reset zone state server-side, then reload zones right away.

    The reset response status is not checked.
    """
    status = await ctx.transport.send("POST", RESET_ENDPOINT)
    _logger.debug("Reset answered with HTTP %d", status)
    await load_zones(ctx)
