import logging

from flask import Flask, jsonify

from .controllers.auth import bp as auth_bp
from .controllers.rentals import bp as rentals_bp
from .controllers.staff import bp as admin_bp
from .controllers.views import bp as views_bp
from .exceptions import RentalEngineError
from .models.store import Store
from .services.common import make_clock
from .utils.constants import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def create_app(config=None, store=None):
    """
    Build the Flask app and the Store it serves.

    Config precedence: DEFAULT_CONFIG < RENTAL_* environment variables < `config`.
    Pass `store` to share one Store between several apps (or tests).
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("RENTAL")
    if config:
        app.config.update(config)

    if store is None:
        store = Store(
            clock=make_clock(app.config.get("DISPLAY_TIMEZONE")),
            max_active_rentals=int(app.config["MAX_ACTIVE_RENTALS"]),
        )
    app.extensions["rental_store"] = store

    app.register_blueprint(auth_bp)
    app.register_blueprint(views_bp)
    app.register_blueprint(rentals_bp)
    app.register_blueprint(admin_bp)

    @app.errorhandler(RentalEngineError)
    def _engine_error(e):
        logger.info("%s: %s", type(e).__name__, e.message)
        return jsonify(ok=False, message=e.message), e.status_code

    return app
