from __future__ import annotations

from typing import Any

from .utils import parse_positive_int

BOOK_TEXT_FIELDS = ("title", "author")


class ValidationError(ValueError):
    pass


class DuplicateBookError(ValueError):
    pass


def _clean_text(payload: dict[str, Any], field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} is required and must be a non-empty string")
    return value.strip()


def _clean_available(payload: dict[str, Any]) -> bool:
    value = payload.get("available")
    if not isinstance(value, bool):
        raise ValidationError("Available must be a boolean")
    return value


def validate_book_payload(payload: dict[str, Any], partial: bool = False) -> dict[str, Any]:
    """Return the cleaned catalog fields from ``payload``.

    Full mode requires title, author and available. Partial mode only checks
    the fields that are present. Checks run in the order title, author,
    available and the first failure is raised.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    cleaned: dict[str, Any] = {}
    for field in BOOK_TEXT_FIELDS:
        if partial and field not in payload:
            continue
        cleaned[field] = _clean_text(payload, field)

    if not partial or "available" in payload:
        cleaned["available"] = _clean_available(payload)

    if partial and not cleaned:
        raise ValidationError("Nothing to update. Provide title, author and/or available")
    return cleaned


def validate_shelf_payload(payload: dict[str, Any]) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    cleaned: dict[str, Any] = {}
    if payload.get("id") is not None:
        book_id = payload["id"]
        if isinstance(book_id, bool) or not isinstance(book_id, int) or book_id < 1:
            raise ValidationError("Id must be a positive integer")
        cleaned["id"] = book_id

    cleaned["name"] = _clean_text(payload, "name")
    cleaned["author"] = _clean_text(payload, "author")
    return cleaned


def parse_book_id(raw: Any) -> int:
    book_id = parse_positive_int(raw)
    if book_id is None:
        raise ValidationError("Invalid book id")
    return book_id
