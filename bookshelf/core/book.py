"""Book — immutable record value held by the book store.

Invariants:
    - id and created_at never change once the value exists
    - Any field change yields a NEW Book; the old value is left untouched

Design Decisions:
    - frozen dataclass: snapshots handed out by the store are safe to read
      without holding the store lock
"""

from dataclasses import dataclass, replace
from datetime import datetime

from bookshelf.core.domain_types import BookId


@dataclass(frozen=True)
class Book:
    """A single book as stored and returned by the store."""

    id: BookId
    title: str
    author: str
    created_at: datetime

    def with_title(self, new_title: str) -> "Book":
        """Copy of this book with only the title replaced."""
        return replace(self, title=new_title)
