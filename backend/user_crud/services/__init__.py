"""Services Layer - business rules over injected repositories.

Invariants:
    - Services never import from api/ (no HTTP knowledge)
    - Repositories are passed in, never constructed here
"""
