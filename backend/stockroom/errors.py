# Overview: Error taxonomy shared by services and routes; every error maps to an HTTP status.


class ApiError(Exception):
    """Base for errors that are reported to the caller as a {message} envelope."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(ApiError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid input"


class ConflictError(ApiError):
    """Duplicate username."""

    status_code = 400
    default_message = "Username already exists"


class NotFoundError(ApiError):
    """Login for a username that was never registered."""

    status_code = 400
    default_message = "User not found"


class AuthError(ApiError):
    status_code = 400
    default_message = "Authentication failed"


class InvalidCredentials(AuthError):
    status_code = 400
    default_message = "Invalid password"


class Unauthorized(AuthError):
    """No bearer token on a protected request."""

    status_code = 401
    default_message = "No token provided"


class Forbidden(AuthError):
    """Bearer token present but invalid or expired."""

    status_code = 403
    default_message = "Invalid or expired token"


class ServerError(ApiError):
    status_code = 500
    default_message = "Server error"
