"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Field checks delegate to core/validators.py so the API and the
      form-validation endpoint apply the same rules

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
