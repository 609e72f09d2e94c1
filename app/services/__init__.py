"""Services Layer — one handler class per resource, one method per operation.

Invariants:
    - Handlers validate, look up, mutate, project — in that order
    - Handlers raise domain errors; the API layer maps them to HTTP

Design Decisions:
    - One handler file per resource for locality (max 5 methods each)
"""
