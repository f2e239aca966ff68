# Overview: Flask API routes for stock records and their images.

from flask import Blueprint, request, jsonify, current_app, g

from ..decorators import require_auth
from ..errors import ApiError, ServerError
from ..services import stock_service
from ..validation import read_payload


stock_bp = Blueprint("stock", __name__, url_prefix="/api/stock")


@stock_bp.post("")
@require_auth
def create_stock_route():
    """
    Add a stock item.

    Multipart form: name, purchasePrice, quantity, date (optional) and a
    single `image` file. JSON bodies are accepted without an image.
    """
    try:
        payload = read_payload(request)
        item = stock_service.create_stock(payload, request.files.get("image"))
        return jsonify({"message": "Stock added successfully", "stock": item.to_dict()}), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception:
        current_app.logger.exception("Failed to add stock for %s", g.get("current_username"))
        return jsonify(ServerError().to_dict()), 500


@stock_bp.get("")
@require_auth
def list_stock_route():
    """Every stock item as a JSON array."""
    try:
        return jsonify(stock_service.list_stock()), 200
    except Exception:
        current_app.logger.exception("Failed to list stock")
        return jsonify(ServerError().to_dict()), 500
