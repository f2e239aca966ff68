# backend/stockroom/__init__.py
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import Config
from .extensions import db, migrate


def create_app(test_config: dict | None = None) -> Flask:
    # public/ holds the view fragments fetched by the client router (/views/<id>.html)
    app = Flask(
        __name__,
        instance_relative_config=True,
        static_folder="public",
        static_url_path="",
    )
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    if not app.config.get("UPLOAD_FOLDER"):
        app.config["UPLOAD_FOLDER"] = os.path.join(app.instance_path, "uploads")

    from .services.upload_service import ensure_upload_folder
    ensure_upload_folder(app.config["UPLOAD_FOLDER"])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=os.path.join(os.path.dirname(app.root_path), "migrations"))

    # Import models so Alembic can discover metadata reliably
    from . import models  # noqa: F401

    # Register blueprints
    from .routes.system import system_bp
    from .routes.auth import auth_bp
    from .routes.stock import stock_bp

    app.register_blueprint(system_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(stock_bp)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # Keep the {message} envelope for 404/405/413 and friends
        return jsonify({"message": e.description or e.name}), e.code

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        configured = app.config.get("CORS_ORIGINS") or ""
        allowed_origins = {o.strip() for o in configured.split(",") if o.strip()}
        if "*" in allowed_origins:
            response.headers["Access-Control-Allow-Origin"] = "*"
        elif origin in allowed_origins:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"
        else:
            return response
        response.headers["Access-Control-Allow-Headers"] = "Authorization, Content-Type"
        response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
        return response

    # Register CLI commands
    from .cli import register_commands
    register_commands(app)

    return app
