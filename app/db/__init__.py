"""Database Package — declarative base shared by every ORM model.

Invariants:
    - Holds metadata only; engines and sessions live in infrastructure/database.py
"""
