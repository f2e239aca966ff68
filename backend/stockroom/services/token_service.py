# Overview: Signed session tokens (JWT, HS256) with a fixed lifetime.

"""
Stateless session tokens.

Tokens embed {username, iat, exp} and are signed with JWT_SECRET. Nothing is
persisted: validity is decided purely by signature and expiry, so a token
cannot be revoked before it expires.
"""

from datetime import timedelta

import jwt
from flask import current_app

from ..errors import Forbidden, Unauthorized
from ..time_utils import utcnow


def token_ttl() -> timedelta:
    return timedelta(seconds=current_app.config.get("TOKEN_TTL_SECONDS", 3600))


def _secret() -> str:
    return current_app.config["JWT_SECRET"]


def _algorithm() -> str:
    return current_app.config.get("JWT_ALGORITHM", "HS256")


def issue_token(username: str) -> str:
    now = utcnow()
    payload = {
        "username": username,
        "iat": now,
        "exp": now + token_ttl(),
    }
    return jwt.encode(payload, _secret(), algorithm=_algorithm())


def decode_token(token: str | None) -> dict:
    """
    Verify a token and return its claims.

    Raises:
        Unauthorized: token missing
        Forbidden: bad signature, malformed, expired, or missing username
    """
    if not token:
        raise Unauthorized()

    try:
        claims = jwt.decode(
            token,
            _secret(),
            algorithms=[_algorithm()],
            options={"require": ["exp", "iat"]},
        )
    except jwt.PyJWTError:
        raise Forbidden()

    if not claims.get("username"):
        raise Forbidden()
    return claims


def bearer_token(auth_header: str | None) -> str | None:
    """Extract <token> from 'Bearer <token>'; None when absent."""
    if not auth_header:
        return None
    parts = auth_header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None
