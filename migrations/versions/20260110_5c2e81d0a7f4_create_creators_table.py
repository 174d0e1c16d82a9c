"""create_creators_table

Revision ID: 5c2e81d0a7f4
Revises:
Create Date: 2026-01-10 14:02:11.482913

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5c2e81d0a7f4"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션"""
    op.create_table(
        "creators",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), server_default="", nullable=False),
        sa.Column("handle", sa.String(length=100), server_default="", nullable=False),
        sa.Column("location", sa.String(length=200), server_default="", nullable=False),
        sa.Column("tagline", sa.Text(), server_default="", nullable=False),
        sa.Column("avatar_url", sa.Text(), server_default="", nullable=False),
        sa.Column(
            "starting_price",
            sa.Numeric(precision=10, scale=2),
            server_default="0",
            nullable=False,
        ),
        sa.Column("content_types", sa.ARRAY(sa.String()), nullable=True),
        sa.Column("platforms", sa.ARRAY(sa.String()), nullable=True),
        sa.Column("attributes", sa.ARRAY(sa.String()), nullable=True),
        sa.Column("audience_size", sa.Integer(), server_default="0", nullable=False),
        sa.Column("avg_views", sa.Integer(), server_default="0", nullable=False),
        sa.Column("engagement_rate", sa.Float(), server_default="0", nullable=False),
        sa.Column(
            "response_time_hours", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column("turnaround_days", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "next_available_days", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column("verified", sa.Boolean(), nullable=True),
        sa.Column("display_order", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_creators_display_order", "creators", ["display_order", "id"]
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션"""
    op.drop_index("ix_creators_display_order", table_name="creators")
    op.drop_table("creators")
