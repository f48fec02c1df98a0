from flask import Blueprint, abort, current_app, jsonify, request

from ..extensions import limiter
from ..services.catalog_service import CatalogService
from ..store import get_catalog_repo
from ..utils import parse_positive_int
from ..validators import ValidationError, parse_book_id

catalog_bp = Blueprint("catalog", __name__, url_prefix="/books")


def _catalog_service() -> CatalogService:
    return CatalogService(get_catalog_repo())


def _write_rate_limit() -> str:
    return current_app.config.get("WRITE_RATE_LIMIT", "60 per minute")


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


@catalog_bp.errorhandler(ValidationError)
def handle_validation_error(exc):
    return jsonify({"error": str(exc)}), 400


@catalog_bp.route("", methods=["GET"])
def books_list():
    author = request.args.get("author")
    return jsonify(_catalog_service().list_books(author=author or None))


@catalog_bp.route("/available", methods=["GET"])
def books_available():
    return jsonify(_catalog_service().list_available_books())


@catalog_bp.route("/<book_id>", methods=["GET"])
def books_detail(book_id):
    parsed_id = parse_positive_int(book_id)
    book = _catalog_service().get_book(parsed_id) if parsed_id is not None else None
    if not book:
        abort(404, description="Book not found")
    return jsonify(book)


@catalog_bp.route("", methods=["POST"])
@limiter.limit(_write_rate_limit)
def books_create():
    book = _catalog_service().create_book(_json_body())
    return jsonify(book), 201


@catalog_bp.route("/<book_id>", methods=["PUT", "PATCH"])
@limiter.limit(_write_rate_limit)
def books_update(book_id):
    parsed_id = parse_book_id(book_id)
    book = _catalog_service().update_book(parsed_id, _json_body())
    if not book:
        abort(404, description="Book not found")
    return jsonify(book)


@catalog_bp.route("/<book_id>", methods=["DELETE"])
@limiter.limit(_write_rate_limit)
def books_delete(book_id):
    parsed_id = parse_book_id(book_id)
    if not _catalog_service().delete_book(parsed_id):
        abort(404, description="Book not found")
    return "", 204
