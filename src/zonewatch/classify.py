"""Status and severity classification into display color categories.

Both classifiers are total: any value they do not recognize (including
``None``) lands in :attr:`ColorCategory.GREEN`, so a malformed code never
blocks rendering.
"""

from __future__ import annotations

from enum import StrEnum


class ColorCategory(StrEnum):
    """Display color category.

    The member value is the CSS class / domain term used by the markup;
    :attr:`hex` is the fill color used on the map.
    """

    RED = "rojo"
    YELLOW = "amarillo"
    GREEN = "verde"

    @property
    def hex(self) -> str:
        return _HEX_COLORS[self]


_HEX_COLORS: dict[ColorCategory, str] = {
    ColorCategory.RED: "#e74c3c",
    ColorCategory.YELLOW: "#f1c40f",
    ColorCategory.GREEN: "#2ecc71",
}

_STATUS_CATEGORIES: dict[str, ColorCategory] = {
    "rojo": ColorCategory.RED,
    "amarillo": ColorCategory.YELLOW,
}

_SEVERITY_CATEGORIES: dict[str, ColorCategory] = {
    "crítica": ColorCategory.RED,
    "alta": ColorCategory.YELLOW,
}


def classify_status(status: object) -> ColorCategory:
    """Map a zone status (``"rojo"``, ``"amarillo"``, ...) to a category."""
    if not isinstance(status, str):
        return ColorCategory.GREEN
    return _STATUS_CATEGORIES.get(status, ColorCategory.GREEN)


def classify_severity(severity: object) -> ColorCategory:
    """Map an alert severity (``"crítica"``, ``"alta"``, ...) to a badge category."""
    if not isinstance(severity, str):
        return ColorCategory.GREEN
    return _SEVERITY_CATEGORIES.get(severity, ColorCategory.GREEN)
