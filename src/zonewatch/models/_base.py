"""Base model and timestamp coercion shared by server payload models.

Every payload model inherits from :class:`ZoneWatchBaseModel` which
freezes instances, ignores unknown keys and stashes the original payload
in ``raw``.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000

# The server emits RFC 3339 timestamps with nanosecond precision.
_SUBMICRO_FRACTION = re.compile(r"(\.\d{6})\d+")


def parse_timestamp(value: Any) -> datetime:
    """Coerce an RFC 3339 string or epoch number to an aware datetime.

    Fractions finer than microseconds are truncated; naive values are
    taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        ts = float(value)
        if ts >= _MS_THRESHOLD:
            ts /= 1000.0
        parsed = datetime.fromtimestamp(ts, tz=UTC)
    elif isinstance(value, str):
        text = _SUBMICRO_FRACTION.sub(r"\1", value.strip())
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"unsupported timestamp value: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]
"""Annotated type that accepts server timestamps (RFC 3339 or epoch)."""


def coerce_optional_str(value: Any) -> str | None:
    """Render scalars as text the way string interpolation would."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


OptionalText = Annotated[str | None, BeforeValidator(coerce_optional_str)]


class ZoneWatchBaseModel(BaseModel):
    """Base for server payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)
    """Original payload dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "raw" in values:
            return values
        stashed = dict(values)
        stashed["raw"] = dict(values)
        return stashed
