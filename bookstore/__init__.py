from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config
from .extensions import limiter
from .routes.catalog import catalog_bp
from .routes.main import main_bp
from .routes.shelf import shelf_bp
from .store import init_store


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    limiter.init_app(app)
    init_store(app)

    app.register_blueprint(main_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(shelf_bp)

    register_error_handlers(app)
    return app


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(OSError)
    def handle_storage_error(exc):
        app.logger.exception("Storage failure: %s", exc)
        return jsonify({"error": "Storage failure"}), 500
