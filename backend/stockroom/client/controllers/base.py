from __future__ import annotations

import logging

from ..container import AppContainer
from ..errors import ClientError
from ..session import ClientSession

logger = logging.getLogger(__name__)


class ViewHandle:
    """
    What a controller hands back from mount(): the per-visit view state and
    the actions the user can take on it. Unmounting closes the handle.
    """

    def __init__(self, controller: "ViewController", container: AppContainer):
        self.controller = controller
        self.container = container
        self.mounted = True

    @property
    def session(self) -> ClientSession:
        return self.controller.session

    def close(self) -> None:
        self.mounted = False

    def ensure_mounted(self) -> None:
        if not self.mounted:
            raise ClientError(f"{self.controller.view_id} view is no longer mounted")

    def render(self) -> None:
        pass


class ViewController:
    """
    Registered with the router once; mounted on every visit to its view.

    Views that need a login check the session marker first and send the user
    to the landing view when it is missing. The server's token check is what
    actually protects data.
    """

    view_id = ""
    handle_class = ViewHandle
    requires_session = True

    def __init__(self, session: ClientSession, navigator):
        self.session = session
        self.navigator = navigator

    def mount(self, container: AppContainer):
        if self.requires_session and not self.session.is_logged_in:
            logger.info("%s view opened without a session", self.view_id)
            self.navigator.redirect_to_landing()
            return None

        handle = self.create_handle(container)
        handle.render()
        return handle

    def create_handle(self, container: AppContainer) -> ViewHandle:
        return self.handle_class(self, container)

    def unmount(self, handle: ViewHandle | None) -> None:
        if handle is not None:
            handle.close()
