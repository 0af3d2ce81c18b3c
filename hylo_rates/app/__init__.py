"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from hylo_rates.app.api.routes import api_bp
from hylo_rates.config import Config, configure_logging
from hylo_rates.core.upstream import RateFeed
from hylo_rates.dashboard.cli import dashboard_cli


def create_app(
    config_object: Any = Config,
    overrides: Optional[Mapping[str, Any]] = None,
    rate_feed: Optional[RateFeed] = None,
) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.extensions["rate_feed"] = rate_feed or RateFeed.from_config(app.config)

    app.register_blueprint(api_bp, url_prefix="/api")
    app.cli.add_command(dashboard_cli)
    return app
