"""Zone feature collection models (GeoJSON with monitoring status)."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from zonewatch._constants import DEFAULT_STATUS
from zonewatch.models._base import OptionalText


class ZoneProperties(BaseModel):
    """Properties of a zone feature.

    Unknown keys are preserved so they round-trip to the map engine.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: OptionalText = None
    status: OptionalText = None

    @property
    def effective_status(self) -> str:
        """Status with empty/missing values defaulted to ``"verde"``."""
        return self.status or DEFAULT_STATUS


class ZoneFeature(BaseModel):
    """A single zone. Geometry is passed through untouched."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["Feature"] = "Feature"
    geometry: dict[str, Any] | None = None
    properties: ZoneProperties = Field(default_factory=ZoneProperties)

    @field_validator("properties", mode="before")
    @classmethod
    def _null_properties(cls, value: Any) -> Any:
        return {} if value is None else value


class ZoneCollection(BaseModel):
    """Full zone set returned by one refresh.

    There are no stable feature ids; every collection is the complete
    replacement for whatever was rendered before.

    Validation is all-or-nothing: one feature with a non-object geometry
    (or non-object properties) fails the whole collection, and the refresh
    that fetched it is dropped.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[ZoneFeature] = Field(default_factory=list)

    @field_validator("features", mode="before")
    @classmethod
    def _null_features(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_geojson(self) -> dict[str, Any]:
        """GeoJSON dict; properties keep only the keys the input carried."""
        data = self.model_dump(mode="json")
        for feature, dumped in zip(self.features, data["features"]):
            dumped["properties"] = feature.properties.model_dump(mode="json", exclude_unset=True)
        return data
