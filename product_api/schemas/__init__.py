"""Pydantic Schemas — response serialization and documented request bodies.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
