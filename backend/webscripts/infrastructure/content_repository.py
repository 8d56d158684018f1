"""Content Repository Adapter — SQLAlchemy implementation of the repository Protocols.

Invariants:
    - Implements SiteService, SiteLike, NodeLike, SearchService (core/repository_protocols.py)
    - Absence is reported as None, never as an exception
    - child_by_name_path walks one name per query; empty segments are skipped
    - Every lookup runs on the request's AsyncSession (no session is opened here)

Design Decisions:
    - Thin wrappers around ORM rows: the resolver never touches SQLAlchemy types
    - Unparseable node references resolve to None (search miss), not to a validation error
"""

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from webscripts.core.node_ref import compose_node_ref, parse_node_ref
from webscripts.core.repository_protocols import ContentServices
from webscripts.infrastructure.database import get_db
from webscripts.models.node import Node
from webscripts.models.site import Site


class RepositoryNode:
    """NodeLike backed by a `nodes` row."""

    def __init__(self, db: AsyncSession, row: Node):
        self._db = db
        self._row = row
        self.name = row.name

    @property
    def id(self) -> str:
        return self._row.id

    @property
    def node_ref(self) -> str:
        return compose_node_ref(self._row.store_type, self._row.store_id, self._row.id)

    @property
    def node_type(self) -> str:
        return self._row.node_type

    @property
    def site_id(self) -> str | None:
        return self._row.site_id

    @property
    def container_name(self) -> str | None:
        return self._row.container_name

    async def child_by_name_path(self, path: str) -> "RepositoryNode | None":
        current = self._row
        for segment in (s for s in path.split("/") if s):
            result = await self._db.execute(
                select(Node).where(
                    Node.parent_id == current.id, Node.name == segment,
                ),
            )
            current = result.scalar_one_or_none()
            if current is None:
                return None
        return RepositoryNode(self._db, current)


class RepositorySite:
    """SiteLike backed by a `sites` row."""

    def __init__(self, db: AsyncSession, row: Site):
        self._db = db
        self._row = row

    @property
    def id(self) -> str:
        return self._row.id

    async def get_container(self, container_id: str) -> RepositoryNode | None:
        if not container_id:
            return None
        result = await self._db.execute(
            select(Node).where(
                Node.site_id == self._row.id,
                Node.container_name == container_id,
            ),
        )
        row = result.scalar_one_or_none()
        return RepositoryNode(self._db, row) if row is not None else None


class RepositorySiteService:
    """SiteService over the `sites` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_site(self, site_id: str) -> RepositorySite | None:
        row = await self._db.get(Site, site_id)
        return RepositorySite(self._db, row) if row is not None else None


class RepositorySearchService:
    """SearchService resolving node references against the `nodes` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_node(self, reference: str) -> RepositoryNode | None:
        ref = parse_node_ref(reference)
        if ref is None:
            return None
        result = await self._db.execute(
            select(Node).where(
                Node.id == ref.id,
                Node.store_type == ref.store_type,
                Node.store_id == ref.store_id,
            ),
        )
        row = result.scalar_one_or_none()
        return RepositoryNode(self._db, row) if row is not None else None


def build_content_services(db: AsyncSession) -> ContentServices:
    return ContentServices(
        site_service=RepositorySiteService(db),
        search=RepositorySearchService(db),
    )


async def get_content_services(
    db: AsyncSession = Depends(get_db),
) -> ContentServices:
    """FastAPI dependency — repository capabilities bound to the request session."""
    return build_content_services(db)
