"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)

Design Decisions:
    - Separate from core domain types: schemas are API contracts, Quote is the entity
"""
