"""Page shell: the regions the client renders into and reads from."""

from __future__ import annotations

from dataclasses import dataclass, field

from zonewatch._constants import (
    ALERTS_ELEMENT_ID,
    MAP_ELEMENT_ID,
    RESET_BUTTON_ELEMENT_ID,
    SMS_FORM_ELEMENT_ID,
    TEXT_FIELD_ELEMENT_ID,
    ZONE_FIELD_ELEMENT_ID,
)
from zonewatch.classify import ColorCategory


@dataclass(frozen=True)
class AlertEntry:
    """One rendered alert list item."""

    tipo: str
    meta: str
    mensaje: str
    severidad: str
    badge: ColorCategory

    def to_html(self) -> str:
        return (
            f'<li><div><strong>{self.tipo}</strong><div class="meta">{self.meta}</div>'
            f"<div>{self.mensaje}</div></div>"
            f'<span class="badge {self.badge.value}">{self.severidad}</span></li>'
        )


@dataclass
class AlertListView:
    """The ``#alerts`` list region. Content is only ever replaced whole."""

    element_id: str = ALERTS_ELEMENT_ID
    entries: list[AlertEntry] = field(default_factory=list)
    html: str = ""

    def replace(self, entries: list[AlertEntry]) -> None:
        self.entries = list(entries)
        self.html = "".join(entry.to_html() for entry in self.entries)


@dataclass
class MessageForm:
    """The ``#smsForm`` form with its ``#zona`` and ``#texto`` fields."""

    element_id: str = SMS_FORM_ELEMENT_ID
    zona: str = ""
    texto: str = ""
    zone_field_id: str = ZONE_FIELD_ELEMENT_ID
    text_field_id: str = TEXT_FIELD_ELEMENT_ID


@dataclass
class PageShell:
    map_element_id: str = MAP_ELEMENT_ID
    reset_button_id: str = RESET_BUTTON_ELEMENT_ID
    alerts: AlertListView = field(default_factory=AlertListView)
    form: MessageForm = field(default_factory=MessageForm)
