"""Book Routes — list, fetch, add, and retitle books.

Invariants:
    - GET /api/v1/books returns every book in insertion order
    - POST /api/v1/books returns 201 with the created book (id assigned by the store)
    - A missing id maps to 404 BOOK_NOT_FOUND; the store itself only returns None
    - Blank title/author surface as 400 INVALID_INPUT from the store

Design Decisions:
    - Plain def handlers: FastAPI runs them in its thread pool, so the store's
      lock serializes genuinely concurrent callers
"""

import logging

from fastapi import APIRouter, Depends, status

from bookshelf.api.dependencies import get_book_store
from bookshelf.core.errors import BookNotFoundError
from bookshelf.core.repository_protocols import BookRepository
from bookshelf.schemas.book import BookCreate, BookResponse, BookTitleUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/books", tags=["books"])


@router.get("", response_model=list[BookResponse])
def list_books(store: BookRepository = Depends(get_book_store)):
    """List all books."""
    return [BookResponse.from_book(b) for b in store.list_all()]


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: int, store: BookRepository = Depends(get_book_store)):
    """Get a single book by id."""
    book = store.get(book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    return BookResponse.from_book(book)


@router.post(
    "", response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_book(body: BookCreate, store: BookRepository = Depends(get_book_store)):
    """Add a new book."""
    book = store.add(body.title, body.author)
    return BookResponse.from_book(book)


@router.patch("/{book_id}/title", response_model=BookResponse)
def update_book_title(
    book_id: int, body: BookTitleUpdate,
    store: BookRepository = Depends(get_book_store),
):
    """Replace a book's title."""
    book = store.update_title(book_id, body.new_title)
    if book is None:
        raise BookNotFoundError(book_id)
    return BookResponse.from_book(book)
