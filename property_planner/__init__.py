"""Property Planner Flask Application Factory."""

import logging

from flask import Flask

from property_planner.config import get_global_settings
from property_planner.storage import create_storage_service


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["STORAGE_BASE_PATH"] = settings.storage_base_path
    app.config["DEFAULT_LANGUAGE"] = settings.default_language
    app.config["MONTE_CARLO_PATHS"] = settings.monte_carlo_paths
    app.config["MONTE_CARLO_VOLATILITY"] = settings.monte_carlo_volatility

    logging.basicConfig(level=settings.log_level)
    logging.getLogger("property_planner").setLevel(settings.log_level)
    app.logger.setLevel(settings.log_level)

    app.extensions["report_storage"] = create_storage_service(settings)

    # Register blueprints
    from property_planner.blueprints.health import health_bp
    from property_planner.blueprints.investment import investment_bp
    from property_planner.blueprints.sell_or_keep import sell_or_keep_bp
    from property_planner.blueprints.taxes import taxes_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(investment_bp)
    app.register_blueprint(sell_or_keep_bp)
    app.register_blueprint(taxes_bp)

    return app
