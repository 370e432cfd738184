import logging
import os

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from .controllers.fleet import bp as fleet_bp
from .exceptions import InvalidDaysError, MalformedRecordError, VehicleNotFoundError
from .models.store import Store
from .utils.constants import DEFAULT_AGENCY_NAME


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def create_app(config=None):
    """
    Build the Flask app around the process-wide Store. The Store is created on
    the first call only; later calls reuse it (see Store.instance), so
    AGENCY_NAME and STRICT_TYPE_TAGS from a second app are ignored and its
    FLEET_LINES are loaded into the existing fleet (duplicates are dropped).
    """
    app = Flask(__name__)
    app.config["AGENCY_NAME"] = os.environ.get("AGENCY_NAME", DEFAULT_AGENCY_NAME)
    app.config["STRICT_TYPE_TAGS"] = _env_flag("STRICT_TYPE_TAGS")
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO").upper()
    app.config["FLEET_LINES"] = []
    if config:
        app.config.update(config)

    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger(__name__).setLevel(app.config["LOG_LEVEL"])

    store = Store.instance(app.config["AGENCY_NAME"], strict_tags=app.config["STRICT_TYPE_TAGS"])
    if app.config["FLEET_LINES"]:
        store.load(app.config["FLEET_LINES"])

    app.register_blueprint(fleet_bp)

    @app.errorhandler(MalformedRecordError)
    @app.errorhandler(InvalidDaysError)
    def bad_request(e):
        return jsonify(error=e.message), 400

    @app.errorhandler(BadRequest)
    def bad_request_body(e):
        return jsonify(error=e.description), 400

    @app.errorhandler(VehicleNotFoundError)
    def not_found(e):
        return jsonify(error=e.message), 404

    return app
