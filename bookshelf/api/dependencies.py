"""Request Dependencies — hands the process-wide book store to route handlers.

Invariants:
    - Every request sees the same store instance (app.state.book_store)
    - Routes receive it through Depends, never through a module global
"""

from fastapi import Request

from bookshelf.config import Settings
from bookshelf.core.repository_protocols import BookRepository


def get_book_store(request: Request) -> BookRepository:
    """FastAPI dependency — the store attached by create_app()."""
    return request.app.state.book_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
