"""Application factory and app-wide configuration."""

from flask import Flask
from flask_cors import CORS

from projection_engine.app.api.routes import api_bp
from projection_engine.config import settings
from projection_engine.observability.logging import setup_logging


def create_app() -> Flask:
    """Build the Flask app instance."""
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.json.sort_keys = False

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
