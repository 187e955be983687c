"""Services Layer - request handlers that orchestrate gateways.

Invariants:
    - Services depend on gateway protocols, never on AsyncSession
"""
