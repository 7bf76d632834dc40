"""Infrastructure Layer — database sessions, repositories and logging.

Invariants:
    - SQLAlchemy errors are mapped to DatabaseError before they leave this layer
"""
