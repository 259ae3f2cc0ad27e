from __future__ import annotations

import pytest

from zonewatch.config import ZoneWatchConfig
from zonewatch.exceptions import ZoneWatchConfigError


def test_defaults() -> None:
    config = ZoneWatchConfig()
    assert config.poll_interval == 3.0
    assert config.accelerated_refresh_delay == 0.15
    assert config.fit_padding == 20
    assert config.default_center == (-11.98, -77.02)
    assert config.default_zoom == 12
    assert config.discard_stale_responses is False
    assert config.escape_popup_html is False


def test_from_env_reads_variables_and_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZONEWATCH_BASE_URL", "http://alerts.local:9000/")
    monkeypatch.setenv("ZONEWATCH_POLL_INTERVAL", "5")
    monkeypatch.setenv("ZONEWATCH_FIT_PADDING", "8")
    monkeypatch.setenv("ZONEWATCH_DISCARD_STALE", "yes")
    monkeypatch.setenv("ZONEWATCH_ESCAPE_POPUPS", "off")

    config = ZoneWatchConfig.from_env(fit_padding=30)

    assert config.base_url == "http://alerts.local:9000"
    assert config.poll_interval == 5.0
    assert config.fit_padding == 30
    assert config.discard_stale_responses is True
    assert config.escape_popup_html is False


def test_from_env_rejects_non_numeric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZONEWATCH_POLL_INTERVAL", "fast")
    with pytest.raises(ZoneWatchConfigError, match="ZONEWATCH_POLL_INTERVAL"):
        ZoneWatchConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"poll_interval": 0},
        {"accelerated_refresh_delay": -1},
        {"time_zone": "Mars/Olympus_Mons"},
    ],
)
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ZoneWatchConfigError):
        ZoneWatchConfig(**kwargs)  # type: ignore[arg-type]
