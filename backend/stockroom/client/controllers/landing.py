from __future__ import annotations

import logging

from ..api import StockApi
from ..errors import ApiRequestError
from ..router import ViewKind
from .base import ViewController, ViewHandle

logger = logging.getLogger(__name__)


class LandingView(ViewHandle):
    def login(self, username: str, password: str) -> bool:
        """Log in and go to the dashboard; on failure the reason is shown inline."""
        self.ensure_mounted()
        username, password = (username or "").strip(), (password or "").strip()
        try:
            self.controller.api.login(username, password)
        except ApiRequestError as e:
            logger.info("Login failed for %s: %s", username, e.message)
            self.container.set_text("error-message", e.message or "Login failed. Try again.")
            return False

        self.container.set_text("error-message", "")
        self.controller.navigator.go(ViewKind.DASHBOARD)
        return True

    def register(self, username: str, password: str) -> bool:
        self.ensure_mounted()
        try:
            message = self.controller.api.register((username or "").strip(), (password or "").strip())
        except ApiRequestError as e:
            self.container.set_text("error-message", e.message)
            return False
        self.container.set_text("error-message", message)
        return True


class LandingController(ViewController):
    view_id = ViewKind.LANDING.value
    handle_class = LandingView
    requires_session = False

    def __init__(self, session, navigator, api: StockApi):
        super().__init__(session, navigator)
        self.api = api

    def mount(self, container):
        # Already logged in: the landing page is skipped
        if self.session.is_logged_in:
            self.navigator.go(ViewKind.DASHBOARD)
            return None
        return super().mount(container)
