# Overview: Request decorators for API routes.

from functools import wraps
from flask import request, jsonify, g

from .errors import AuthError
from .services import auth_service
from .services.token_service import bearer_token


def require_auth(f):
    """
    Require a valid bearer token before the route body runs.

    Sets g.current_username on success.

    Returns 401 when no token is sent and 403 when the token is invalid or
    expired; the route (and the database) is never touched in either case.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = bearer_token(request.headers.get("Authorization"))

        try:
            g.current_username = auth_service.authenticate(token)
        except AuthError as e:
            return jsonify(e.to_dict()), e.status_code

        return f(*args, **kwargs)

    return decorated_function
