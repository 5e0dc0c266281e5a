"""Core Layer — book values, the book store, and the error hierarchy.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - No IO, no async: every operation is a short in-memory step

Design Decisions:
    - Functional core separated from the HTTP shell: routes stay thin and
      the store is testable without a server
"""
