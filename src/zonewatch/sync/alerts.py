"""Alert list rendering."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo

from pydantic import TypeAdapter, ValidationError

from zonewatch._constants import ALERTS_ENDPOINT
from zonewatch.classify import classify_severity
from zonewatch.exceptions import ZoneWatchError
from zonewatch.models.alert import Alert
from zonewatch.page import AlertEntry
from zonewatch.sync.context import SyncContext

_logger = logging.getLogger(__name__)

_ALERT_LIST = TypeAdapter(list[Alert])


def build_alert_entry(alert: Alert, tz: ZoneInfo) -> AlertEntry:
    """``zone • HH:MM:SS[ • excerpt]`` meta line plus severity badge."""
    try:
        local = alert.timestamp.astimezone(tz)
    except (OverflowError, ValueError):
        # zero times near datetime.min cannot shift west; keep their own offset
        local = alert.timestamp
    local_time = local.strftime("%H:%M:%S")
    meta = f"{alert.zona} • {local_time}"
    if alert.extracto:
        meta += f" • {alert.extracto}"
    return AlertEntry(
        tipo=alert.tipo,
        meta=meta,
        mensaje=alert.mensaje,
        severidad=alert.severidad,
        badge=classify_severity(alert.severidad),
    )


async def refresh_alerts(ctx: SyncContext) -> bool:
    """Fetch alerts and replace the list, keeping server order.

    On failure the previous list content is left untouched.
    """
    seq = ctx.sequencer.dispatch(ALERTS_ENDPOINT)
    try:
        payload = await ctx.transport.request_json("GET", ALERTS_ENDPOINT)
        alerts = _ALERT_LIST.validate_python(payload)
    except (ZoneWatchError, ValidationError) as exc:
        _logger.error("alerts refresh failed: %s", exc)
        return False

    if ctx.config.discard_stale_responses and not ctx.sequencer.accept(ALERTS_ENDPOINT, seq):
        _logger.debug("Dropping stale alerts response #%d", seq)
        return False

    tz = ZoneInfo(ctx.config.time_zone)
    ctx.page.alerts.replace([build_alert_entry(alert, tz) for alert in alerts])
    return True
