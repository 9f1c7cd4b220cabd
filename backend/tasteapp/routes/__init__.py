from flask import Flask

from .auth_routes import auth_bp
from .commentary_routes import commentary_bp
from .health_routes import health_bp
from .page_routes import pages_bp
from .spotify_routes import spotify_bp

__all__ = ["register_routes"]


def register_routes(app: Flask) -> None:
    app.register_blueprint(pages_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(spotify_bp)
    app.register_blueprint(commentary_bp)
