"""API Layer: FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON, including errors

Design Decisions:
    - Thin routes: validate input, call the repository, shape the response
"""
