"""Client configuration for zonewatch."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from zonewatch.exceptions import ZoneWatchConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, cast: type[int] | type[float]) -> int | float:
    try:
        return cast(value)
    except ValueError as exc:
        raise ZoneWatchConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class TileLayerConfig:
    """Base tile layer added to the map at startup."""

    url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    max_zoom: int = 19
    attribution: str = "© OpenStreetMap contributors"


@dataclasses.dataclass(frozen=True)
class ZoneWatchConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Server base URL, without trailing slash.
    poll_interval : float
        Seconds between periodic refresh ticks.
    accelerated_refresh_delay : float
        Seconds to wait after a successful message submit before the
        one-shot refresh. Gives the server's background processor time to
        derive alerts and zone state from the message.
    fit_padding : int
        Padding (pixels, each side) used when framing the first zone load.
    default_center : tuple of float
        Fallback ``(lat, lng)`` viewport center.
    default_zoom : int
        Fallback viewport zoom.
    request_timeout : float
        Total timeout per HTTP request in seconds.
    time_zone : str
        IANA time zone used to localize alert timestamps.
    discard_stale_responses : bool
        Drop responses that arrive after a newer response for the same
        endpoint was already applied.
    escape_popup_html : bool
        HTML-escape zone name and status in popups.
    tiles : TileLayerConfig
        Base tile layer settings.
    """

    base_url: str = "http://localhost:8080"
    poll_interval: float = 3.0
    accelerated_refresh_delay: float = 0.15
    fit_padding: int = 20
    default_center: tuple[float, float] = (-11.98, -77.02)
    default_zoom: int = 12
    request_timeout: float = 10.0
    time_zone: str = "America/Lima"
    discard_stale_responses: bool = False
    escape_popup_html: bool = False
    tiles: TileLayerConfig = dataclasses.field(default_factory=TileLayerConfig)

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ZoneWatchConfigError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.accelerated_refresh_delay < 0:
            raise ZoneWatchConfigError(
                f"accelerated_refresh_delay must not be negative, got {self.accelerated_refresh_delay}"
            )
        try:
            ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ZoneWatchConfigError(f"unknown time zone {self.time_zone!r}") from exc
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> ZoneWatchConfig:
        """Create configuration from ``ZONEWATCH_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}

        _ENV_STR_MAP = {
            "ZONEWATCH_BASE_URL": "base_url",
            "ZONEWATCH_TIME_ZONE": "time_zone",
        }
        for env_key, field_name in _ENV_STR_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        _ENV_NUMBER_MAP: dict[str, tuple[str, type[int] | type[float]]] = {
            "ZONEWATCH_POLL_INTERVAL": ("poll_interval", float),
            "ZONEWATCH_REFRESH_DELAY": ("accelerated_refresh_delay", float),
            "ZONEWATCH_FIT_PADDING": ("fit_padding", int),
            "ZONEWATCH_REQUEST_TIMEOUT": ("request_timeout", float),
        }
        for env_key, (field_name, cast) in _ENV_NUMBER_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_number(env_key, val, cast)

        if "discard_stale_responses" not in overrides:
            config_kwargs["discard_stale_responses"] = _env_bool(env.get("ZONEWATCH_DISCARD_STALE"), False)

        if "escape_popup_html" not in overrides:
            config_kwargs["escape_popup_html"] = _env_bool(env.get("ZONEWATCH_ESCAPE_POPUPS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
