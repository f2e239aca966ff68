from __future__ import annotations

from ..router import ViewKind
from ..state import AppState
from .base import ViewController, ViewHandle


class ReportsView(ViewHandle):
    def render(self) -> None:
        self.container.render("report-list", self.controller.state.report_lines())


class ReportsController(ViewController):
    view_id = ViewKind.REPORTS.value
    handle_class = ReportsView

    def __init__(self, session, navigator, state: AppState):
        super().__init__(session, navigator)
        self.state = state
