from flask import Blueprint, current_app, jsonify

from ..store import get_catalog_repo, get_shelf_repo

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def dashboard():
    return current_app.config["BOOKS_DASHBOARD_MESSAGE"], 200, {"Content-Type": "text/plain; charset=utf-8"}


@main_bp.route("/healthz")
def healthz():
    try:
        catalog_count = get_catalog_repo().ping()
    except OSError as exc:
        current_app.logger.warning("Health check could not load catalog store: %s", exc)
        return jsonify({"status": "degraded", "store": "down", "error": str(exc)}), 503

    return jsonify(
        {
            "status": "ok",
            "store": "up",
            "catalog_books": catalog_count,
            "shelf_books": get_shelf_repo().count_books(),
        }
    )
