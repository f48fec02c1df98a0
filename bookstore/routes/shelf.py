from flask import Blueprint, abort, current_app, jsonify, request

from ..extensions import limiter
from ..services.shelf_service import ShelfService
from ..store import get_shelf_repo
from ..utils import parse_positive_int
from ..validators import DuplicateBookError, ValidationError

shelf_bp = Blueprint("shelf", __name__, url_prefix="/book")


def _shelf_service() -> ShelfService:
    return ShelfService(get_shelf_repo())


@shelf_bp.errorhandler(ValidationError)
def handle_validation_error(exc):
    return jsonify({"error": str(exc)}), 400


@shelf_bp.errorhandler(DuplicateBookError)
def handle_duplicate_book(exc):
    return jsonify({"error": str(exc)}), 409


@shelf_bp.route("", methods=["GET"])
def shelf_list():
    author = request.args.get("author")
    return jsonify(_shelf_service().list_books(author=author or None))


@shelf_bp.route("/<book_id>", methods=["GET"])
def shelf_detail(book_id):
    parsed_id = parse_positive_int(book_id)
    book = _shelf_service().get_book(parsed_id) if parsed_id is not None else None
    if not book:
        abort(404, description="Book not found")
    return jsonify(book)


@shelf_bp.route("", methods=["POST"])
@limiter.limit(lambda: current_app.config.get("WRITE_RATE_LIMIT", "60 per minute"))
def shelf_add():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    book = _shelf_service().add_book(payload)
    return jsonify({"message": "Data saved Successfully", "book": book}), 201
