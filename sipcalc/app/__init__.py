"""Application factory and app-wide configuration."""

import logging

from flask import Flask
from flask_cors import CORS

from sipcalc import config
from sipcalc.app.api.routes import api_bp


def create_app() -> Flask:
    """Build the Flask app instance."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    app = Flask(__name__)
    # keep the rupee sign readable in responses
    app.json.ensure_ascii = False

    CORS(
        app,
        resources={r"/api/*": {"origins": config.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
