"""Pydantic Schemas: JSON response contracts for the API endpoints.

Design Decisions:
    - Separate from models/ and core/: schemas are API contracts only
"""
