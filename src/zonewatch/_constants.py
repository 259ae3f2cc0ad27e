"""Internal constants shared across the library."""

ZONES_GEOJSON_ENDPOINT = "/api/zones_geojson"
ALERTS_ENDPOINT = "/api/alerts"
SMS_ENDPOINT = "/api/sms"
RESET_ENDPOINT = "/api/reset"
ZONE_STATUSES_ENDPOINT = "/api/zones"
IMPORT_ZONES_ENDPOINT = "/api/admin/import_zones"

USER_AGENT = "zonewatch/0.1"

# ------------------------------------------------------------------
# Page shell element ids
# ------------------------------------------------------------------

MAP_ELEMENT_ID = "leaflet-map"
ALERTS_ELEMENT_ID = "alerts"
SMS_FORM_ELEMENT_ID = "smsForm"
ZONE_FIELD_ELEMENT_ID = "zona"
TEXT_FIELD_ELEMENT_ID = "texto"
RESET_BUTTON_ELEMENT_ID = "resetBtn"

# ------------------------------------------------------------------
# Zone styling
# ------------------------------------------------------------------

DEFAULT_STATUS = "verde"
OUTLINE_COLOR = "#333"
OUTLINE_WEIGHT = 1
FILL_OPACITY = 0.6
POPUP_TEMPLATE = "<strong>{name}</strong><br/>Estado: {status}"
