"""Site ORM — a named collaborative workspace owning container nodes.

Invariants:
    - id is the site short name (e.g. "marketing"), used verbatim in URLs
    - Containers are Node rows with site_id set and a container_name

Design Decisions:
    - String primary key: site ids are addressed by name, never by surrogate key
    - cascade delete for containers: a site owns its container trees
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from webscripts.db.base import Base


class Site(Base):
    """Site entity — root of the site/container/path addressing scheme."""
    __tablename__ = "sites"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    containers: Mapped[list["Node"]] = relationship(
        "Node", back_populates="site", cascade="all, delete-orphan",
    )
