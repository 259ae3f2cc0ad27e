"""Synchronization core.

Everything that turns polled server state into rendered state lives here:
the owning :class:`SyncContext`, the zone layer reconciler, the alert list
renderer, the refresh scheduler and the write actions.
"""

from zonewatch.sync.actions import reset_zones, submit_message
from zonewatch.sync.alerts import build_alert_entry, refresh_alerts
from zonewatch.sync.context import SyncContext
from zonewatch.sync.scheduler import RefreshScheduler
from zonewatch.sync.sequencing import ResponseSequencer
from zonewatch.sync.zones import apply_zones, load_zones

__all__ = [
    "RefreshScheduler",
    "ResponseSequencer",
    "SyncContext",
    "apply_zones",
    "build_alert_entry",
    "load_zones",
    "refresh_alerts",
    "reset_zones",
    "submit_message",
]
