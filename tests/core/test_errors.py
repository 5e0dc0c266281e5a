"""Error Hierarchy — codes, categories, statuses and the REST envelope."""

from bookshelf.core.errors import (
    BookshelfError, BookNotFoundError, InvalidInputError,
    ErrorCategory, ErrorSeverity,
)


def test_invalid_input_is_400_validation():
    err = InvalidInputError("title cannot be empty or whitespace", "title")
    assert isinstance(err, BookshelfError)
    assert err.http_status == 400
    assert err.code == "INVALID_INPUT"
    assert err.category is ErrorCategory.VALIDATION
    assert err.field == "title"
    assert err.context.field == "title"


def test_book_not_found_is_404():
    err = BookNotFoundError(99)
    assert err.http_status == 404
    assert err.code == "BOOK_NOT_FOUND"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.severity is ErrorSeverity.INFO
    assert err.message == "Book '99' not found"
    assert err.context.book_id == 99


def test_to_response_envelope_shape():
    body = BookNotFoundError(7).to_response()
    error = body["error"]
    assert error["code"] == "BOOK_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "info"
    assert error["context"] == {"book_id": 7, "field": None}
    assert "timestamp" in error


def test_str_is_the_message():
    assert str(InvalidInputError("author cannot be empty or whitespace", "author")) == (
        "author cannot be empty or whitespace"
    )
