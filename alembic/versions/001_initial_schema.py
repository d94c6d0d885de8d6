"""Initial schema - snippet ownership and permission grants.

Revision ID: 001
Revises:
Create Date: 2025-11-03

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "snippet",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
    )
    op.create_index("ix_snippet_owner", "snippet", ["owner_id"])

    op.create_table(
        "permission",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("resource_id", sa.String(255), nullable=False),
        sa.Column("can_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("can_edit", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    # grant upsert relies on this index (ON CONFLICT (user_id, resource_id))
    op.create_index(
        "ix_permission_user_resource", "permission", ["user_id", "resource_id"], unique=True
    )
    op.create_index("ix_permission_resource", "permission", ["resource_id"])


def downgrade() -> None:
    op.drop_table("permission")
    op.drop_table("snippet")
