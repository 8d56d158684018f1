"""Service test fixtures — async DB, seeded repository tree, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection
    - Seed data inserted through the ORM, the same way the adapter reads it
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from webscripts.core.domain_types import NodeType
from webscripts.db.base import Base
from webscripts.infrastructure.database import get_db, DatabaseSessionManager
from webscripts.models.node import Node
from webscripts.models.site import Site
import webscripts.infrastructure.database as db_module
from webscripts.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_repository(test_db):
    """Site "marketing" with a documentLibrary container:

        documentLibrary/
            Plans/
                q3.txt

    plus a free-standing node in archive://SpacesStore.
    """
    site = Site(id="marketing", title="Marketing")
    test_db.add(site)
    library = Node(
        name="documentLibrary", site_id="marketing",
        container_name="documentLibrary",
    )
    test_db.add(library)
    await test_db.flush()
    plans = Node(name="Plans", parent_id=library.id)
    test_db.add(plans)
    await test_db.flush()
    report = Node(
        name="q3.txt", parent_id=plans.id, node_type=NodeType.CONTENT.value,
    )
    archived = Node(
        name="old-report.txt", store_type="archive",
        node_type=NodeType.CONTENT.value,
    )
    test_db.add_all([report, archived])
    await test_db.commit()
    return {
        "library": library,
        "plans": plans,
        "report": report,
        "archived": archived,
    }
