import pytest

from bookstore.validators import (
    ValidationError,
    parse_book_id,
    validate_book_payload,
    validate_shelf_payload,
)


def test_full_validation_reports_first_failing_field_in_order():
    with pytest.raises(ValidationError, match="^Title"):
        validate_book_payload({"author": "", "available": "no"})

    with pytest.raises(ValidationError, match="^Author"):
        validate_book_payload({"title": "Dune", "author": 12, "available": "no"})

    with pytest.raises(ValidationError, match="^Available"):
        validate_book_payload({"title": "Dune", "author": "Frank Herbert", "available": 1})


def test_partial_validation_only_checks_present_fields():
    assert validate_book_payload({"title": " Dune "}, partial=True) == {"title": "Dune"}
    assert validate_book_payload({"available": False}, partial=True) == {"available": False}

    with pytest.raises(ValidationError, match="^Available"):
        validate_book_payload({"available": None}, partial=True)


def test_non_object_payload_is_rejected():
    with pytest.raises(ValidationError, match="JSON object"):
        validate_book_payload(["Dune"])


def test_shelf_payload_id_must_be_positive_integer():
    assert validate_shelf_payload({"id": 6, "name": " Gaban ", "author": "Premchand"}) == {
        "id": 6,
        "name": "Gaban",
        "author": "Premchand",
    }
    assert "id" not in validate_shelf_payload({"name": "Gaban", "author": "Premchand"})

    for bad_id in (0, -3, "6", True, 2.5):
        with pytest.raises(ValidationError, match="^Id"):
            validate_shelf_payload({"id": bad_id, "name": "Gaban", "author": "Premchand"})


@pytest.mark.parametrize("raw, expected", [("1", 1), (" 42 ", 42), (7, 7)])
def test_parse_book_id_accepts_positive_integers(raw, expected):
    assert parse_book_id(raw) == expected


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "1.5", "", None, True])
def test_parse_book_id_rejects_other_values(raw):
    with pytest.raises(ValidationError, match="Invalid book id"):
        parse_book_id(raw)
