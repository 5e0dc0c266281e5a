"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - The payload reports the current book count (store is in-memory, so
      there is no separate readiness dependency to check)
"""

from fastapi import APIRouter, Depends, status

from bookshelf.api.dependencies import get_app_settings, get_book_store
from bookshelf.config import Settings
from bookshelf.core.repository_protocols import BookRepository

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check(
    store: BookRepository = Depends(get_book_store),
    settings: Settings = Depends(get_app_settings),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "books": len(store),
    }
