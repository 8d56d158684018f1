"""Infrastructure Layer — database access, repository adapter, and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - All SQLAlchemy errors mapped to core DatabaseError
"""
