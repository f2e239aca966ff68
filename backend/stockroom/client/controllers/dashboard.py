from __future__ import annotations

import logging
from datetime import datetime

from ..api import StockApi
from ..errors import ApiRequestError
from ..router import ViewKind
from .base import ViewController, ViewHandle

logger = logging.getLogger(__name__)

SORT_LATEST = "latest"
SORT_EARLIEST = "earliest"
STOCK_MODAL = "stock-modal"


def _parse_timestamp(value) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).replace(tzinfo=None)
    except ValueError:
        return None


def stock_date(item: dict) -> datetime:
    """The purchase date, else the creation time; undated items sort as oldest."""
    return _parse_timestamp(item.get("date")) or _parse_timestamp(item.get("createdAt")) or datetime.min


def sort_stock(items: list[dict], order: str = SORT_LATEST) -> list[dict]:
    return sorted(items, key=stock_date, reverse=order != SORT_EARLIEST)


def describe_stock(item: dict) -> str:
    when = stock_date(item)
    date_text = when.strftime("%Y-%m-%d") if when != datetime.min else "-"
    return (
        f"{item.get('name')} | Quantity: {item.get('quantity')} | "
        f"Price: KSH {item.get('purchasePrice')} | Date: {date_text} | "
        f"{item.get('image') or '(no image)'}"
    )


class DashboardView(ViewHandle):
    def __init__(self, controller, container):
        super().__init__(controller, container)
        self.sort_order = SORT_LATEST
        self.stock: list[dict] = []

    @property
    def api(self) -> StockApi:
        return self.controller.api

    def render(self) -> None:
        self.container.set_text("username-display", self.session.username or "")
        self.load_stock()

    def load_stock(self) -> list[dict]:
        try:
            items = self.api.list_stock()
        except ApiRequestError as e:
            logger.error("Failed to load stock items: %s", e.message)
            self.container.set_text("stock-error", e.message)
            return self.stock

        self.container.set_text("stock-error", "")
        self.stock = sort_stock(items, self.sort_order)
        self.container.render("stock-list", [describe_stock(item) for item in self.stock])
        return self.stock

    def set_sort_order(self, order: str) -> list[dict]:
        self.ensure_mounted()
        self.sort_order = SORT_EARLIEST if order == SORT_EARLIEST else SORT_LATEST
        return self.load_stock()

    def open_stock_modal(self) -> None:
        self.ensure_mounted()
        self.container.open_modal(STOCK_MODAL)

    def close_stock_modal(self) -> None:
        self.container.close_modal(STOCK_MODAL)

    def submit_stock(self, name, price, quantity, image_name, image, date) -> bool:
        """
        Send the stock form. Every field, including the image, is required
        here even though the server accepts a submission without an image.
        """
        self.ensure_mounted()
        name = (name or "").strip()
        if not name or price in (None, "") or quantity in (None, "") or not image_name or image is None or not date:
            self.container.alert("Fill all fields properly.")
            return False

        try:
            self.api.add_stock(name, price, quantity, image_name, image, date)
        except ApiRequestError as e:
            if e.status is None:
                self.container.alert("Server error.")
            else:
                self.container.alert(f"Error: {e.message}")
            return False

        self.container.alert("Stock added and saved!")
        self.close_stock_modal()
        self.load_stock()
        return True

    def logout(self) -> None:
        self.session.clear()
        self.controller.navigator.redirect_to_landing()


class DashboardController(ViewController):
    view_id = ViewKind.DASHBOARD.value
    handle_class = DashboardView

    def __init__(self, session, navigator, api: StockApi):
        super().__init__(session, navigator)
        self.api = api
