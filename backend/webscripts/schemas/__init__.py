"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (template arguments, API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
