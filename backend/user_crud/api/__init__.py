"""API Layer - FastAPI routes, the user handler and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - User endpoints answer with plain text or JSON User bodies

Design Decisions:
    - Thin routes delegate to UserHandler, which delegates to UserService
"""
