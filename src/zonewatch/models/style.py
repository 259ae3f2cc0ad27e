"""Visual style handed to the map engine for a zone feature."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from zonewatch._constants import FILL_OPACITY, OUTLINE_COLOR, OUTLINE_WEIGHT


class VisualStyle(BaseModel):
    """Outline + fill style. Dumps with camelCase keys (``fillColor``)."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    color: str = OUTLINE_COLOR
    weight: int = OUTLINE_WEIGHT
    fill_color: str
    fill_opacity: float = FILL_OPACITY

    def as_engine_options(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
