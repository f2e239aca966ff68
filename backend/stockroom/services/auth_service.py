# Overview: Service-layer operations for auth; encapsulates business logic and database work.

"""
Authentication Service

Passwords are stored as salted bcrypt hashes with a fixed work factor
(BCRYPT_ROUNDS, default 10). Login issues a stateless signed token through
token_service; nothing about the session is stored server-side.

Failure modes map onto the error taxonomy in stockroom.errors:
- register: ValidationError (empty field), ConflictError (username taken)
- login: ValidationError, NotFoundError (unknown user), InvalidCredentials
- authenticate: Unauthorized (no token), Forbidden (bad/expired token)
"""

import bcrypt
from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, InvalidCredentials, NotFoundError, ValidationError
from ..extensions import db
from ..models import User
from . import token_service


CREDENTIALS_REQUIRED = "Username and password are required"


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash password with bcrypt using the configured work factor."""
    if rounds is None:
        rounds = current_app.config.get("BCRYPT_ROUNDS", 10)
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify password against bcrypt hash.

    Returns False for malformed hashes instead of raising.
    """
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        return False


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def find_user(username: str) -> User | None:
    return db.session.query(User).filter_by(username=username).first()


def register(username: str, password: str) -> dict:
    """
    Create a user account.

    Raises:
        ValidationError: username or password empty
        ConflictError: username already registered
    """
    username = _clean(username)
    if not username or not password or not isinstance(password, str):
        raise ValidationError(CREDENTIALS_REQUIRED)

    if find_user(username) is not None:
        raise ConflictError("Username already exists")

    user = User(username=username, password_hash=hash_password(password))
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        db.session.rollback()
        raise ConflictError("Username already exists")

    current_app.logger.info("Registered user %s", username)
    return {"message": "User registered successfully"}


def login(username: str, password: str) -> dict:
    """
    Check credentials and issue a session token.

    Returns {"token", "username"}.
    """
    username = _clean(username)
    if not username or not password or not isinstance(password, str):
        raise ValidationError(CREDENTIALS_REQUIRED)

    user = find_user(username)
    if user is None:
        raise NotFoundError("User not found")

    if not verify_password(password, user.password_hash):
        raise InvalidCredentials("Invalid password")

    token = token_service.issue_token(user.username)
    return {"token": token, "username": user.username}


def authenticate(token: str | None) -> str:
    """Guard for protected endpoints. Returns the username carried by the token."""
    claims = token_service.decode_token(token)
    return claims["username"]
