"""Node ORM — one addressable object in the repository tree.

Invariants:
    - (store_type, store_id, id) is the node reference; id is globally unique
    - Names are unique among siblings (parent_id, name)
    - container_name is set only on a site's container root (parent_id is NULL there)
    - A site has at most one container root per container_name

Design Decisions:
    - Adjacency list (parent_id) over materialised paths: name-path walks are
      short and renames never rewrite descendants
    - id stored as 36-char string: same value appears in node references
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webscripts.core.domain_types import NodeType
from webscripts.db.base import Base


class Node(Base):
    """Node entity — folder or content item."""
    __tablename__ = "nodes"
    __table_args__ = (
        UniqueConstraint("parent_id", "name", name="uq_nodes_parent_name"),
        Index("ix_nodes_parent_id", "parent_id"),
        UniqueConstraint(
            "site_id", "container_name", name="uq_nodes_site_container",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    store_type: Mapped[str] = mapped_column(
        String(50), nullable=False, default="workspace",
    )
    store_id: Mapped[str] = mapped_column(
        String(100), nullable=False, default="SpacesStore",
    )
    parent_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("nodes.id", ondelete="CASCADE"), nullable=True,
    )
    site_id: Mapped[str | None] = mapped_column(
        String(100), ForeignKey("sites.id", ondelete="CASCADE"), nullable=True,
    )
    container_name: Mapped[str | None] = mapped_column(
        String(100), nullable=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    node_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default=NodeType.FOLDER.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    site: Mapped["Site"] = relationship(
        "Site", back_populates="containers",
    )
