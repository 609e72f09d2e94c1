"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services/ handlers)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - Each module composes its handler class per request through a FastAPI
      dependency: this is the whole "routing table", no container
"""
