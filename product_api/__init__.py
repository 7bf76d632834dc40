"""Products API — CRUD REST service for products.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
