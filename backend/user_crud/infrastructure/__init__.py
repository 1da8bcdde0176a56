"""Infrastructure Layer - persistence adapters and cross-cutting concerns.

Invariants:
    - Every SQLAlchemy exception leaving this layer is a StorageFailureError
    - Repositories implement the Protocols in core/repository_protocols.py

Design Decisions:
    - Adapters are constructed per request around the request's AsyncSession
"""
