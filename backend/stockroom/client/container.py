from __future__ import annotations

import html as html_lib
import re
import time
from dataclasses import dataclass

_VIEW_SECTION = re.compile(r'(<section\b[^>]*\bclass=")([^"]*\bview\b[^"]*)(")', re.IGNORECASE)


@dataclass
class Toast:
    message: str
    shown_at: float
    duration: float = 2.5

    def visible(self, now: float | None = None) -> bool:
        if now is None:
            now = time.monotonic()
        return now - self.shown_at < self.duration


class AppContainer:
    """
    The #app element and what controllers render into it.

    Element contents are kept by element id: `regions` for list-like elements
    (one string per rendered row or option), `texts` for single text nodes.
    Replacing the container's HTML wipes everything that was rendered for the
    previous view.
    """

    def __init__(self):
        self.html = ""
        self.active = False
        self.error: str | None = None
        self.regions: dict[str, list[str]] = {}
        self.texts: dict[str, str] = {}
        self.open_modals: set[str] = set()
        self.alerts: list[str] = []
        self.toast: Toast | None = None

    def replace(self, html: str) -> None:
        self.html = html
        self.active = False
        self.error = None
        self.regions = {}
        self.texts = {}
        self.open_modals = set()
        self.toast = None

    def activate_section(self) -> bool:
        """Add the `active` class to the first section.view; False if there is none."""
        html, count = _VIEW_SECTION.subn(r"\1\2 active\3", self.html, count=1)
        if count:
            self.html = html
            self.active = True
        return bool(count)

    def show_error(self, message: str) -> None:
        self.replace(f'<p style="color:red;">{html_lib.escape(message)}</p>')
        self.error = message

    def render(self, element_id: str, rows: list[str]) -> None:
        self.regions[element_id] = list(rows)

    def rows(self, element_id: str) -> list[str]:
        return list(self.regions.get(element_id, []))

    def set_text(self, element_id: str, text: str) -> None:
        self.texts[element_id] = text

    def text(self, element_id: str) -> str:
        return self.texts.get(element_id, "")

    def open_modal(self, modal_id: str) -> None:
        self.open_modals.add(modal_id)

    def close_modal(self, modal_id: str) -> None:
        self.open_modals.discard(modal_id)

    def is_open(self, modal_id: str) -> bool:
        return modal_id in self.open_modals

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    @property
    def last_alert(self) -> str | None:
        return self.alerts[-1] if self.alerts else None

    def show_toast(self, message: str, duration: float = 2.5) -> Toast:
        self.toast = Toast(message=message, shown_at=time.monotonic(), duration=duration)
        return self.toast
