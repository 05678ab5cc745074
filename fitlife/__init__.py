import logging

from flask import Flask

from .config import Config
from .errors import register_error_handlers
from .extensions import db, jwt, migrate
from .routes import register_routes
from .utils.jwt_utils import register_jwt_callbacks


def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    logging.getLogger("fitlife").setLevel(level)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    if not app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET_KEY is not set; refusing to start without a token secret")

    configure_logging(app)

    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    register_jwt_callbacks(jwt)
    register_error_handlers(app)
    register_routes(app)

    with app.app_context():
        from fitlife.models import (
            health_profile,
            daily_log,
            challenge
        )
        db.create_all()

    from fitlife.controller.health_profile_controller import health_profile_bp
    app.register_blueprint(health_profile_bp)

    from fitlife.controller.daily_log_controller import daily_log_bp
    app.register_blueprint(daily_log_bp)

    from fitlife.controller.analytics_controller import analytics_bp
    app.register_blueprint(analytics_bp)

    from fitlife.controller.challenge_controller import challenge_bp
    app.register_blueprint(challenge_bp)

    from fitlife.controller.recommendation_controller import recommendation_bp
    app.register_blueprint(recommendation_bp)

    app.logger.info("%s ready", app.config["APP_NAME"])
    return app
