# Overview: Flask API routes for registration and login; parses input and returns JSON responses.

from flask import Blueprint, request, jsonify, current_app

from ..errors import ApiError, ServerError
from ..services import auth_service
from ..validation import read_payload


auth_bp = Blueprint("auth", __name__, url_prefix="/api")


@auth_bp.post("/register")
def register_route():
    """
    Create an account.

    400 on a missing field or an existing username.
    """
    try:
        data = read_payload(request)
        result = auth_service.register(data.get("username"), data.get("password"))
        return jsonify(result), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception:
        current_app.logger.exception("Failed to register user")
        return jsonify(ServerError().to_dict()), 500


@auth_bp.post("/login")
def login_route():
    """
    Authenticate and return {token, username}.

    Unknown user and wrong password are both 400; only the message differs.
    The token goes in `Authorization: Bearer <token>` on protected routes.
    """
    try:
        data = read_payload(request)
        result = auth_service.login(data.get("username"), data.get("password"))
        return jsonify(result), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception:
        current_app.logger.exception("Failed to login user")
        return jsonify(ServerError().to_dict()), 500
