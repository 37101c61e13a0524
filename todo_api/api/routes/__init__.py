"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes reach the database only through the injected store

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
