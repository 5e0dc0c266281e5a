"""Book Store — the single authoritative owner of all Book values.

Invariants:
    - Identifiers come from a dedicated counter, incremented exactly once per
      successful add; they are unique, increasing, and never reused
    - A failed add (rejected input) consumes no identifier and mutates nothing
    - list_all() preserves insertion order: seed books first, then additions
    - update_title() replaces one slot in place; every other slot is untouched
    - Every read and write holds self._lock, so no caller observes a half-applied change

Design Decisions:
    - One coarse threading.Lock over all operations: critical sections are tiny
      and never do IO, so a read-write lock buys nothing here
    - Absence is None, not an exception: "no such book" is an expected outcome
      for a mutation API, the HTTP shell decides how to surface it
    - Blank or whitespace-only title/author are rejected with InvalidInputError;
      non-blank text is stored verbatim
    - clock injectable so tests can pin created_at
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable

from bookshelf.core.book import Book
from bookshelf.core.domain_types import BookId, BookField
from bookshelf.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_SEED: tuple[tuple[str, str], ...] = (
    ("GraphQL für Einsteiger", "Max Mustermann"),
    ("GraphQL in der Praxis", "Lisa Musterfrau"),
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def check_text(value: str, field: BookField) -> None:
    """Raise InvalidInputError when value is empty or whitespace-only."""
    if not value or not value.strip():
        raise InvalidInputError(
            f"{field.value} cannot be empty or whitespace", field.value,
        )


class BookStore:
    """Thread-safe in-memory book store.

    Construct once per process and share it. Seed books (title, author pairs)
    receive ids 1..N in the given order and the construction time as created_at.
    """

    def __init__(
        self,
        seed: Iterable[tuple[str, str]] = (),
        clock: Clock = utc_now,
    ) -> None:
        self._clock = clock
        self._books: list[Book] = []
        self._next_id = 1
        self._lock = threading.Lock()

        created_at = clock()
        for title, author in seed:
            check_text(title, BookField.TITLE)
            check_text(author, BookField.AUTHOR)
            self._books.append(
                Book(BookId(self._next_id), title, author, created_at),
            )
            self._next_id += 1

    @classmethod
    def with_default_seed(cls, clock: Clock = utc_now) -> "BookStore":
        return cls(DEFAULT_SEED, clock=clock)

    def list_all(self) -> list[Book]:
        """Point-in-time snapshot of every book, in insertion order."""
        with self._lock:
            return list(self._books)

    def get(self, book_id: int) -> Book | None:
        with self._lock:
            index = self._index_of(book_id)
            return None if index is None else self._books[index]

    def add(self, title: str, author: str) -> Book:
        """Create a book with the next identifier and append it."""
        check_text(title, BookField.TITLE)
        check_text(author, BookField.AUTHOR)
        with self._lock:
            book = Book(BookId(self._next_id), title, author, self._clock())
            self._books.append(book)
            self._next_id += 1
        logger.info("Book added", extra={"book_id": book.id})
        return book

    def update_title(self, book_id: int, new_title: str) -> Book | None:
        """Replace the title of one book. None when no book has book_id."""
        check_text(new_title, BookField.TITLE)
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                updated = None
            else:
                updated = self._books[index].with_title(new_title)
                self._books[index] = updated
        if updated is None:
            logger.debug("Title update missed", extra={"book_id": book_id})
        else:
            logger.info("Book title updated", extra={"book_id": book_id})
        return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: int) -> int | None:
        # Caller holds self._lock.
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
