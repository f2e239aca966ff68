from __future__ import annotations

from ..errors import ValidationError
from ..router import ViewKind
from ..state import AppState, Sale
from .base import ViewController, ViewHandle

SALE_MODAL = "sale-modal"
SALE_TOAST = "Sale complete!"


class SalesView(ViewHandle):
    @property
    def state(self) -> AppState:
        return self.controller.state

    def open_new_sale(self) -> list[tuple[int, str]]:
        """Fill the product dropdown with in-stock products; (index, label) options."""
        self.ensure_mounted()
        available = self.state.available_products()
        if not available:
            self.container.alert("No products available for sale.")
            return []

        options = [(i, f"{p.name} (Available: {p.quantity})") for i, p in available]
        self.container.render("sale-product", [label for _, label in options])
        self.container.open_modal(SALE_MODAL)
        return options

    def confirm_sale(self, index, quantity) -> Sale | None:
        self.ensure_mounted()
        try:
            sale = self.state.record_sale(index, quantity)
        except ValidationError as e:
            self.container.alert(e.message)
            return None

        self.close_sale()
        self.container.show_toast(SALE_TOAST)
        return sale

    def close_sale(self) -> None:
        self.container.close_modal(SALE_MODAL)


class SalesController(ViewController):
    view_id = ViewKind.SALES.value
    handle_class = SalesView

    def __init__(self, session, navigator, state: AppState):
        super().__init__(session, navigator)
        self.state = state
