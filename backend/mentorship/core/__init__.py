"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, db/ or models/
    - All functions are pure and deterministic; safe to call from any thread

Design Decisions:
    - Functional core separated from the FastAPI/SQLAlchemy shell so validation
      and status rules are testable without a database
"""
