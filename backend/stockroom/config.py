# backend/stockroom/config.py
from __future__ import annotations
import os


class Config:
    # Used by Flask itself; tokens are signed with JWT_SECRET
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # SQLite file in the instance folder unless a connection string is given
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///stockroom.sqlite3",
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET = os.environ.get("JWT_SECRET", "dev-jwt-secret-change-me")
    JWT_ALGORITHM = "HS256"
    TOKEN_TTL_SECONDS = int(os.environ.get("TOKEN_TTL_SECONDS", "3600"))

    # bcrypt work factor
    BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "10"))

    # None means <instance_path>/uploads, resolved in create_app()
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER")
    UPLOAD_URL_PREFIX = "/uploads"

    PORT = int(os.environ.get("PORT", "5000"))

    # Comma separated; "*" allows any origin
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
