"""
Products and sales held in client memory.

Nothing here is sent to the server; an AppState lives as long as the client
session and is passed explicitly to the controllers that read or change it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from .errors import DuplicateProductError, InsufficientStockError, ValidationError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
WHOLE_NUMBER = re.compile(r"-?[0-9]+")


def parse_quantity(value, minimum: int = 0) -> int | None:
    """Whole number >= minimum, from an int or a digit string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and WHOLE_NUMBER.fullmatch(value.strip()):
        number = int(value.strip())
    else:
        return None
    return number if number >= minimum else None


def _text(value) -> str:
    return "" if value is None else str(value).strip()


@dataclass
class Product:
    id: str
    name: str
    quantity: int

    def describe(self) -> str:
        return f"ID: {self.id} | {self.name} | Qty: {self.quantity}"


@dataclass
class SaleItem:
    name: str
    sold_qty: int


@dataclass
class Sale:
    items: list[SaleItem]
    timestamp: str

    def describe(self) -> str:
        items = ", ".join(f"{item.name} x {item.sold_qty}" for item in self.items)
        return f"{self.timestamp} | {items}"


@dataclass
class AppState:
    products: list[Product] = field(default_factory=list)
    sales: list[Sale] = field(default_factory=list)
    clock: Callable[[], datetime] = datetime.now

    def find_product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def add_product(self, product_id, name, quantity) -> Product:
        product_id, name = _text(product_id), _text(name)
        if not product_id or not name or _text(quantity) == "":
            raise ValidationError("Please fill all fields.")
        qty = parse_quantity(quantity)
        if qty is None:
            raise ValidationError("Quantity must be a whole number of 0 or more.")
        if self.find_product(product_id) is not None:
            raise DuplicateProductError("Product ID already exists.")

        product = Product(id=product_id, name=name, quantity=qty)
        self.products.append(product)
        return product

    def product_at(self, index) -> Product:
        if isinstance(index, str) and WHOLE_NUMBER.fullmatch(index.strip()):
            index = int(index)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.products):
            raise ValidationError("Unknown product.")
        return self.products[index]

    def edit_product(self, index, name, quantity) -> Product:
        product = self.product_at(index)
        name = _text(name)
        qty = parse_quantity(quantity)
        if not name or qty is None:
            raise ValidationError("Please enter valid product details.")
        product.name = name
        product.quantity = qty
        return product

    def available_products(self) -> list[tuple[int, Product]]:
        """(index, product) pairs for products that still have stock."""
        return [(i, p) for i, p in enumerate(self.products) if p.quantity > 0]

    def record_sale(self, index, quantity) -> Sale:
        """
        Sell `quantity` units of the product at `index`.

        The product is left untouched when the quantity is invalid or larger
        than what is available.
        """
        qty = parse_quantity(quantity, minimum=1)
        if index is None or index == "" or qty is None:
            raise ValidationError("Please select a product and enter a valid quantity.")
        product = self.product_at(index)
        if qty > product.quantity:
            raise InsufficientStockError(f"Not enough stock for {product.name}")

        product.quantity -= qty
        sale = Sale(
            items=[SaleItem(name=product.name, sold_qty=qty)],
            timestamp=self.clock().strftime(TIMESTAMP_FORMAT),
        )
        self.sales.append(sale)
        return sale

    def report_lines(self) -> list[str]:
        return [sale.describe() for sale in self.sales]
