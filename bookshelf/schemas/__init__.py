"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary only

Design Decisions:
    - Separate from core values: schemas are API contracts, Book is the stored value
"""
