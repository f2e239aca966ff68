# Overview: Service-layer operations for stock records; encapsulates business logic and database work.

from flask import current_app

from ..errors import ValidationError
from ..extensions import db
from ..models import StockItem
from ..time_utils import parse_stock_date
from ..validation import coerce_integer, coerce_number, require_fields
from . import upload_service


def _parse_date(value):
    if value is None or isinstance(value, str) and not value.strip():
        return None
    try:
        return parse_stock_date(str(value))
    except ValueError:
        raise ValidationError("date must be an ISO-8601 date")


def create_stock(payload: dict, image_file=None) -> StockItem:
    """
    Persist one stock item, storing its image first.

    payload keys: name (required), purchasePrice, quantity, date.

    Raises ValidationError on missing name or non-numeric numbers. Database and
    filesystem errors propagate unchanged.
    """
    (name,) = require_fields(payload, "name", message="Stock name is required")
    purchase_price = coerce_number(payload.get("purchasePrice"), "purchasePrice")
    quantity = coerce_integer(payload.get("quantity"), "quantity")
    date = _parse_date(payload.get("date"))

    image = upload_service.save_upload(image_file) or ""

    item = StockItem(
        name=name,
        image=image,
        purchase_price=purchase_price,
        quantity=quantity,
        date=date,
    )
    db.session.add(item)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info("Stock item %s created (%s)", item.id, name)
    return item


def list_stock() -> list[dict]:
    """Every stock item, oldest first. No filtering or pagination."""
    items = (
        db.session.query(StockItem)
        .order_by(StockItem.created_at.asc(), StockItem.id.asc())
        .all()
    )
    return [item.to_dict() for item in items]
