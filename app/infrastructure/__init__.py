"""Infrastructure Layer — database plumbing, repositories and logging.

Invariants:
    - Repositories never commit; handlers own the unit of work
    - All SQLAlchemy failures mapped to core/errors types

Design Decisions:
    - Store access isolated here so services/ reads as validation + orchestration
"""
