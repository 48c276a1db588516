"""Database Infrastructure: SQLAlchemy declarative base."""
