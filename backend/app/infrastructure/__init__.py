"""Infrastructure Layer - database access, gateways, and cross-cutting concerns.

Invariants:
    - Every SQLAlchemy error is caught here and turned into an Outcome or PersistenceError
"""
