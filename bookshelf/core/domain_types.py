"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BookId wraps int — store-assigned, starts at 1, never reused
    - All valid enumerated values encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", int)


# ─── Enums ───────────────────────────────────────────────────────

class BookField(str, Enum):
    """Text fields a caller may supply — used to name the offending field on rejection."""
    TITLE = "title"
    AUTHOR = "author"


class LogFormat(str, Enum):
    """Supported log output formats."""
    JSON = "json"
    TEXT = "text"
