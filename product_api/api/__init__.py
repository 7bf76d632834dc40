"""API Layer — FastAPI routes, request pipeline, CORS and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON responses
"""
