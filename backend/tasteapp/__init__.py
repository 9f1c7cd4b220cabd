from flask import Flask, jsonify
from flask_cors import CORS

from .config import BaseConfig, get_config
from .errors import WorkshopError
from .routes import register_routes
from .services.auth_service import init_token_store


def create_app(config_name: str | None = None, config: BaseConfig | None = None) -> Flask:
    """Application factory so tests and CLI share consistent setup."""
    app = Flask(__name__)

    app_config = config if config is not None else get_config(config_name)()
    app.config.from_object(app_config)

    CORS(app, resources={r"/api/*": {"origins": "*"}})
    init_token_store(app)
    register_routes(app)
    register_error_handlers(app)

    return app


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(WorkshopError)
    def handle_workshop_error(err: WorkshopError):
        if err.status_code >= 500:
            app.logger.error("%s: %s", type(err).__name__, err.message)
        else:
            app.logger.info("%s: %s", type(err).__name__, err.message)
        return jsonify(err.to_dict()), err.status_code
