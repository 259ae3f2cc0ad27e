from __future__ import annotations

import pytest

from zonewatch.models import ZoneFeature
from zonewatch.styling import popup_for, style_for


def _feature(properties: object) -> ZoneFeature:
    return ZoneFeature.model_validate({"type": "Feature", "geometry": None, "properties": properties})


def test_style_uses_fixed_outline_and_opacity() -> None:
    style = style_for(_feature({"name": "Zona Norte", "status": "rojo"}))
    assert style.as_engine_options() == {
        "color": "#333",
        "weight": 1,
        "fillColor": "#e74c3c",
        "fillOpacity": 0.6,
    }


@pytest.mark.parametrize("properties", [{"name": "Zona Sur"}, {"name": "Zona Sur", "status": ""}, None])
def test_missing_status_renders_green(properties: object) -> None:
    feature = _feature(properties)
    assert style_for(feature).fill_color == "#2ecc71"
    assert popup_for(feature).endswith("Estado: verde")


def test_popup_template_is_exact() -> None:
    feature = _feature({"name": "Zona Centro", "status": "amarillo"})
    assert popup_for(feature) == "<strong>Zona Centro</strong><br/>Estado: amarillo"


def test_popup_with_missing_name_interpolates_none() -> None:
    assert popup_for(_feature({"status": "rojo"})) == "<strong>None</strong><br/>Estado: rojo"


def test_popup_is_not_escaped_by_default() -> None:
    feature = _feature({"name": "<b>Zona</b>", "status": "rojo"})
    assert popup_for(feature) == "<strong><b>Zona</b></strong><br/>Estado: rojo"


def test_popup_escaping_is_opt_in() -> None:
    feature = _feature({"name": "<script>x</script>", "status": "a&b"})
    assert popup_for(feature, escape=True) == (
        "<strong>&lt;script&gt;x&lt;/script&gt;</strong><br/>Estado: a&amp;b"
    )


def test_unrecognized_status_keeps_text_but_fills_green() -> None:
    feature = _feature({"name": "Zona Este", "status": "naranja"})
    assert style_for(feature).fill_color == "#2ecc71"
    assert popup_for(feature).endswith("Estado: naranja")
