"""initial_schema

Create the foundational schema for Date Spots:
- Spots (counters and rating live on the spot row)
- Votes (one up/down vote per user and spot)

Revision ID: 3c41d7e9a2b0
Revises:
Create Date: 2025-11-10 19:02:11.532804

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d7e9a2b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE spot_category AS ENUM (
                'outdoor', 'indoor', 'food', 'culture', 'adventure',
                'romantic', 'water', 'view', 'entertainment'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_type AS ENUM ('up', 'down');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "spots",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("location", sa.String(300), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(name="spot_category", create_type=False),
            nullable=False,
        ),
        sa.Column("price_level", sa.Integer, nullable=False, server_default="2"),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("rating", sa.Float, nullable=False, server_default="0"),
        sa.Column("total_votes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("upvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column(
            "tags", postgresql.ARRAY(sa.Text), nullable=False, server_default="{}"
        ),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("pet_friendly", sa.Boolean, nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("created_by_display_name", sa.String(255), nullable=True),
        sa.Column("created_by_photo_url", sa.Text, nullable=True),
        sa.CheckConstraint("price_level BETWEEN 1 AND 4", name="price_level_range"),
        sa.CheckConstraint("rating >= 0 AND rating <= 5", name="rating_range"),
        sa.CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
        sa.CheckConstraint("downvotes >= 0", name="downvotes_non_negative"),
    )
    op.create_index(
        "idx_spots_created_at", "spots", [sa.text("created_at DESC")]
    )
    op.create_index("idx_spots_category", "spots", ["category"])

    op.create_table(
        "votes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column(
            "spot_id",
            sa.String(64),
            sa.ForeignKey("spots.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "vote_type",
            postgresql.ENUM(name="vote_type", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("user_id", "spot_id", name="unique_user_spot_vote"),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])
    op.create_index("idx_votes_spot_id", "votes", ["spot_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("spots")
    op.execute("DROP TYPE IF EXISTS vote_type")
    op.execute("DROP TYPE IF EXISTS spot_category")
