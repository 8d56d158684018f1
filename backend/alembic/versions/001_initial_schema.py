"""Initial schema — sites and nodes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "sites",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "nodes",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("store_type", sa.String(50), nullable=False, server_default="workspace"),
        sa.Column("store_id", sa.String(100), nullable=False, server_default="SpacesStore"),
        sa.Column(
            "parent_id", sa.String(36),
            sa.ForeignKey("nodes.id", ondelete="CASCADE"), nullable=True,
        ),
        sa.Column(
            "site_id", sa.String(100),
            sa.ForeignKey("sites.id", ondelete="CASCADE"), nullable=True,
        ),
        sa.Column("container_name", sa.String(100), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("node_type", sa.String(20), nullable=False, server_default="folder"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("parent_id", "name", name="uq_nodes_parent_name"),
        sa.UniqueConstraint("site_id", "container_name", name="uq_nodes_site_container"),
    )
    op.create_index("ix_nodes_parent_id", "nodes", ["parent_id"])


def downgrade() -> None:
    op.drop_index("ix_nodes_parent_id", table_name="nodes")
    op.drop_table("nodes")
    op.drop_table("sites")
