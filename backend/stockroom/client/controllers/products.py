from __future__ import annotations

from ..errors import ValidationError
from ..router import ViewKind
from ..state import AppState
from .base import ViewController, ViewHandle

EDIT_MODAL = "edit-modal"


class ProductsView(ViewHandle):
    def __init__(self, controller, container):
        super().__init__(controller, container)
        self.edit_index: int | None = None

    @property
    def state(self) -> AppState:
        return self.controller.state

    def render(self) -> None:
        self.container.render("product-list", [p.describe() for p in self.state.products])

    def add_product(self, product_id, name, quantity) -> bool:
        self.ensure_mounted()
        try:
            self.state.add_product(product_id, name, quantity)
        except ValidationError as e:
            self.container.alert(e.message)
            return False
        self.render()
        return True

    def open_edit(self, index: int) -> bool:
        self.ensure_mounted()
        try:
            product = self.state.product_at(index)
        except ValidationError as e:
            self.container.alert(e.message)
            return False
        self.edit_index = int(index)
        self.container.set_text("edit-name", product.name)
        self.container.set_text("edit-qty", str(product.quantity))
        self.container.open_modal(EDIT_MODAL)
        return True

    def save_edit(self, name, quantity) -> bool:
        self.ensure_mounted()
        if self.edit_index is None:
            self.container.alert("Select a product to edit.")
            return False
        try:
            self.state.edit_product(self.edit_index, name, quantity)
        except ValidationError as e:
            self.container.alert(e.message)
            return False
        self.render()
        self.close_edit()
        return True

    def close_edit(self) -> None:
        self.edit_index = None
        self.container.close_modal(EDIT_MODAL)


class ProductsController(ViewController):
    view_id = ViewKind.PRODUCTS.value
    handle_class = ProductsView

    def __init__(self, session, navigator, state: AppState):
        super().__init__(session, navigator)
        self.state = state
