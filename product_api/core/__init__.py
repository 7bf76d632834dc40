"""Core Layer — pure validation rules, error types and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no DB access
"""
