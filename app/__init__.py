from flask import Flask
from .config import Config
from .extensions import db
from app.errors import register_error_handlers


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)

    # JSON error bodies for every ApiError and for unknown /api routes
    register_error_handlers(app)

    from app.routes import register_blueprints
    register_blueprints(app)

    return app
