"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Wire format is camelCase (alias_generator); Python attributes stay snake_case
    - Request schemas only enforce JSON types; business validation (required,
      bounds, uniqueness) happens in core/ validators so messages stay ordered

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
