"""Boundary Protocols — contracts between the HTTP shell and the book store.

Invariants:
    - Routes depend on BookRepository, never on the concrete store class
    - All methods are synchronous: implementations are in-memory

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from typing import Protocol

from bookshelf.core.book import Book


class BookRepository(Protocol):
    """Contract for book storage — implemented by BookStore."""
    def list_all(self) -> list[Book]: ...
    def get(self, book_id: int) -> Book | None: ...
    def add(self, title: str, author: str) -> Book: ...
    def update_title(self, book_id: int, new_title: str) -> Book | None: ...
    def __len__(self) -> int: ...
