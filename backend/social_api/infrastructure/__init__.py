"""Infrastructure Layer: database sessions, SQL repositories and logging setup.

Invariants:
    - SQLAlchemy errors never escape as raw exceptions (mapped to core/errors.py)
"""
