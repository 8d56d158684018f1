"""Database Package — SQLAlchemy declarative Base for the sites and nodes tables.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL
"""
