"""
Hash-based view router.

A view id (the URL fragment) selects an HTML fragment and a controller. The
router fetches the fragment, swaps it into the app container, then mounts the
controller registered for that id. The previous view's controller is
unmounted before its markup is replaced.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Protocol

from .container import AppContainer
from .location import Location
from .session import ClientSession

logger = logging.getLogger(__name__)


class ViewKind(str, enum.Enum):
    LANDING = "landing"
    DASHBOARD = "dashboard"
    PRODUCTS = "products"
    SALES = "sales"
    REPORTS = "reports"


DEFAULT_VIEW = ViewKind.DASHBOARD.value
LANDING_VIEW = ViewKind.LANDING.value


class FragmentLoader(Protocol):
    def fetch(self, view_id: str) -> str: ...


class Controller(Protocol):
    def mount(self, container: AppContainer): ...

    def unmount(self, handle) -> None: ...


class CallbackController:
    """Adapts a zero-argument initializer to the mount/unmount interface."""

    def __init__(self, init_fn: Callable[[], object]):
        self.init_fn = init_fn

    def mount(self, container: AppContainer):
        self.init_fn()
        return None

    def unmount(self, handle) -> None:
        pass


def _view_key(view_id) -> str:
    if isinstance(view_id, ViewKind):
        return view_id.value
    return str(view_id)


class ViewRegistry:
    """view id -> controller. Registering an id again replaces the old entry."""

    def __init__(self):
        self._entries: dict[str, Controller] = {}

    def register(self, view_id, init) -> Controller:
        if hasattr(init, "mount") and hasattr(init, "unmount"):
            controller = init
        elif callable(init):
            controller = CallbackController(init)
        else:
            raise TypeError(f"view initializer for {view_id!r} must be callable or a controller")
        self._entries[_view_key(view_id)] = controller
        return controller

    def get(self, view_id) -> Controller | None:
        return self._entries.get(_view_key(view_id))

    def __contains__(self, view_id) -> bool:
        return _view_key(view_id) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class ViewRouter:
    def __init__(
        self,
        container: AppContainer,
        loader: FragmentLoader,
        session: ClientSession,
        location: Location | None = None,
        registry: ViewRegistry | None = None,
        default_view: str = DEFAULT_VIEW,
        landing_view: str = LANDING_VIEW,
    ):
        self.container = container
        self.loader = loader
        self.session = session
        self.location = location if location is not None else Location()
        self.registry = registry if registry is not None else ViewRegistry()
        self.default_view = default_view
        self.landing_view = landing_view

        self.current_view: str | None = None
        self.current_handle = None
        self._current_controller: Controller | None = None
        self._generation = 0
        self._started = False

    def register(self, view_id, init) -> Controller:
        return self.registry.register(view_id, init)

    def start(self) -> str:
        """Follow location changes from now on, and load the current view once."""
        if not self._started:
            self.location.add_listener(self._on_location_event)
            self._started = True
        return self.navigate()

    def stop(self) -> None:
        self.location.remove_listener(self._on_location_event)
        self._started = False
        self._unmount_current()

    def _on_location_event(self, event: str) -> None:
        logger.debug("Location event %s -> %s", event, self.location.fragment)
        self.navigate()

    def navigate(self) -> str:
        """Load the view named by the location fragment; returns the view id actually shown."""
        view_id = self.location.fragment or self.default_view
        logger.info("Navigating to view: %s", view_id)

        if not self.session.is_logged_in and view_id != self.landing_view:
            self.redirect_to_landing()
            return self.landing_view

        if self._load(view_id):
            self.location.replace(view_id)
        return self.current_view

    def go(self, view_id) -> str:
        """Push a history entry for view_id and show it."""
        view_id = _view_key(view_id)
        changed = self.location.set_hash(view_id)
        if changed and self._started:
            # the hashchange listener already navigated
            return self.current_view
        return self.navigate()

    def redirect_to_landing(self) -> None:
        """Drop the requested view and show the landing view in its place."""
        logger.info("No active session, redirecting to %s", self.landing_view)
        self.location.replace(self.landing_view)
        self._load(self.landing_view)

    def _unmount_current(self) -> None:
        controller, handle = self._current_controller, self.current_handle
        self._current_controller = None
        self.current_handle = None
        if controller is not None:
            controller.unmount(handle)

    def _load(self, view_id: str) -> bool:
        """Returns False when another navigation started while this one was mounting."""
        self._generation += 1
        generation = self._generation

        try:
            markup = self.loader.fetch(view_id)

            self._unmount_current()
            self.container.replace(markup)
            self.container.activate_section()
            self.current_view = view_id

            controller = self.registry.get(view_id)
            if controller is None:
                return True
            handle = controller.mount(self.container)

            # A controller may navigate away while mounting (guard redirects);
            # the nested load then owns current_handle.
            if generation == self._generation:
                self._current_controller = controller
                self.current_handle = handle
            else:
                controller.unmount(handle)
        except Exception:
            logger.exception("Failed to load view %s", view_id)
            if generation == self._generation:
                self._unmount_current()
                self.current_view = view_id
                self.container.show_error(f'Failed to load "{view_id}" view.')

        return generation == self._generation
