"""Per-feature style and popup content for zone features."""

from __future__ import annotations

import html

from zonewatch._constants import POPUP_TEMPLATE
from zonewatch.classify import classify_status
from zonewatch.models.style import VisualStyle
from zonewatch.models.zone import ZoneFeature


def style_for(feature: ZoneFeature) -> VisualStyle:
    """Fixed dark 1px outline, status-driven fill at 60% opacity."""
    category = classify_status(feature.properties.effective_status)
    return VisualStyle(fill_color=category.hex)


def popup_for(feature: ZoneFeature, *, escape: bool = False) -> str:
    """Popup markup for *feature*.

    ``name`` is interpolated as-is (a missing name renders as ``None``).
    Values are not HTML-escaped unless *escape* is set.
    """
    name = str(feature.properties.name)
    status = feature.properties.effective_status
    if escape:
        name = html.escape(name)
        status = html.escape(status)
    return POPUP_TEMPLATE.format(name=name, status=status)
