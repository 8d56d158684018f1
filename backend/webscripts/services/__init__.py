"""Services Layer — request orchestration over repository Protocols.

Invariants:
    - Services depend on core Protocols, never on the SQLAlchemy adapter directly
"""
