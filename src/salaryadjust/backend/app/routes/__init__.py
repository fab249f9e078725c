"""Blueprint registrations for application routes."""

from flask import Flask

from .adjustments import blueprint as adjustments_blueprint
from .pages import blueprint as pages_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(adjustments_blueprint)
    app.register_blueprint(pages_blueprint)
