"""Book Schemas — Pydantic models for the API boundary.

Invariants:
    - Wire shape of a book is {id, title, author, createdAt}
    - Request models check types only; blank-text rejection lives in the store
      so every caller, HTTP or not, gets the same rule

Design Decisions:
    - camelCase aliases on the wire, snake_case attributes in Python;
      populate_by_name lets tests and callers use either
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bookshelf.core.book import Book


class BookCreate(BaseModel):
    """Payload for adding a book."""
    title: str
    author: str


class BookTitleUpdate(BaseModel):
    """Payload for replacing a book's title."""
    model_config = ConfigDict(populate_by_name=True)

    new_title: str = Field(alias="newTitle")


class BookResponse(BaseModel):
    """Book response — public-facing book data."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    author: str
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_book(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            created_at=book.created_at,
        )
