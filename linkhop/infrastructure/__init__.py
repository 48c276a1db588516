"""Infrastructure Layer: database access and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - All database failures mapped to core.errors.DatabaseError
"""
