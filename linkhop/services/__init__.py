"""Service Layer: history recording and landing-page rendering used by the API routes.

Invariants:
    - Services never import from api/
"""
