"""Route Modules: one file per concern.

Invariants:
    - Each module defines its own APIRouter
"""
