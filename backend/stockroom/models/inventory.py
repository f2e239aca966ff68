from __future__ import annotations

from ..extensions import db
from ..time_utils import to_utc_z, utcnow


class StockItem(db.Model):
    """
    A purchased stock batch with an optional product photo.

    image holds the public URL of the uploaded file ("/uploads/<name>"), or ""
    when the submission carried no file. Rows are insert-only.
    """
    __tablename__ = "stock_items"
    __table_args__ = (
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    image = db.Column(db.String(512), nullable=False, default="")
    purchase_price = db.Column(db.Float, nullable=True)
    quantity = db.Column(db.Integer, nullable=True)

    # Purchase date entered by the user; createdAt is when the row was written
    date = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "purchasePrice": self.purchase_price,
            "quantity": self.quantity,
            "date": to_utc_z(self.date),
            "createdAt": to_utc_z(self.created_at),
            "updatedAt": to_utc_z(self.updated_at),
        }
