"""SQLAlchemy table definitions for Date Spots.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# SPOTS TABLE
# ============================================================================
spots_table = Table(
    "spots",
    metadata,
    # Seeded spots keep their short ids, new spots get UUID strings
    Column("id", String(64), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("location", String(300), nullable=False),
    Column(
        "category",
        Enum(
            "outdoor",
            "indoor",
            "food",
            "culture",
            "adventure",
            "romantic",
            "water",
            "view",
            "entertainment",
            name="spot_category",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("price_level", Integer, nullable=False, server_default="2"),
    Column("description", Text, nullable=False, server_default=""),
    Column("rating", Float, nullable=False, server_default="0"),
    Column("total_votes", Integer, nullable=False, server_default="0"),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("tags", postgresql.ARRAY(Text), nullable=False, server_default="{}"),
    Column("image_url", Text, nullable=True),
    Column("latitude", Float, nullable=True),
    Column("longitude", Float, nullable=True),
    Column("pet_friendly", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("created_by", String(255), nullable=True),
    Column("created_by_display_name", String(255), nullable=True),
    Column("created_by_photo_url", Text, nullable=True),
    CheckConstraint("price_level BETWEEN 1 AND 4", name="price_level_range"),
    CheckConstraint("rating >= 0 AND rating <= 5", name="rating_range"),
    CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="downvotes_non_negative"),
)

Index("idx_spots_created_at", spots_table.c.created_at.desc())
Index("idx_spots_category", spots_table.c.category)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", String(255), nullable=False),  # Identity provider subject
    Column(
        "spot_id", String(64), ForeignKey("spots.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "vote_type",
        Enum("up", "down", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "spot_id", name="unique_user_spot_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_spot_id", votes_table.c.spot_id)
