"""Wires session, state, API client, router and controllers into one client."""

from __future__ import annotations

import httpx

from .api import StockApi, create_http_client
from .container import AppContainer
from .controllers import (
    DashboardController,
    LandingController,
    ProductsController,
    ReportsController,
    SalesController,
)
from .fragments import HttpFragmentLoader
from .location import Location
from .router import FragmentLoader, ViewKind, ViewRouter
from .session import ClientSession
from .state import AppState


class ClientApp:
    def __init__(
        self,
        http: httpx.Client,
        session: ClientSession | None = None,
        state: AppState | None = None,
        container: AppContainer | None = None,
        loader: FragmentLoader | None = None,
        location: Location | None = None,
    ):
        self.http = http
        self.session = session if session is not None else ClientSession()
        self.state = state if state is not None else AppState()
        self.container = container if container is not None else AppContainer()
        self.api = StockApi(http, self.session)
        self.router = ViewRouter(
            self.container,
            loader if loader is not None else HttpFragmentLoader(http),
            self.session,
            location=location,
        )

        self.controllers = {
            ViewKind.LANDING: LandingController(self.session, self.router, self.api),
            ViewKind.DASHBOARD: DashboardController(self.session, self.router, self.api),
            ViewKind.PRODUCTS: ProductsController(self.session, self.router, self.state),
            ViewKind.SALES: SalesController(self.session, self.router, self.state),
            ViewKind.REPORTS: ReportsController(self.session, self.router, self.state),
        }
        for kind, controller in self.controllers.items():
            self.router.register(kind, controller)

    @classmethod
    def connect(cls, base_url: str, **kwargs) -> "ClientApp":
        return cls(create_http_client(base_url), **kwargs)

    @property
    def view(self):
        """Handle of the mounted view, or None."""
        return self.router.current_handle

    def start(self) -> str:
        return self.router.start()

    def go(self, view_id) -> str:
        return self.router.go(view_id)

    def close(self) -> None:
        self.router.stop()
        self.http.close()
