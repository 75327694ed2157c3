"""seed_spots

Revision ID: 9f0b6a1c5d27
Revises: 3c41d7e9a2b0
Create Date: 2025-11-10 19:40:52.118093

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from datespot.persistence.mappers import spot_to_dict
from datespot.persistence.seed import INITIAL_SPOT_RECORDS, initial_spots


# revision identifiers, used by Alembic.
revision: str = "9f0b6a1c5d27"
down_revision: Union[str, Sequence[str], None] = "3c41d7e9a2b0"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Seed the initial Gothenburg spots."""
    spots_table = sa.table(
        "spots",
        sa.column("id", sa.String),
        sa.column("name", sa.String),
        sa.column("location", sa.String),
        sa.column("category", postgresql.ENUM(name="spot_category", create_type=False)),
        sa.column("price_level", sa.Integer),
        sa.column("description", sa.Text),
        sa.column("rating", sa.Float),
        sa.column("total_votes", sa.Integer),
        sa.column("upvotes", sa.Integer),
        sa.column("downvotes", sa.Integer),
        sa.column("tags", postgresql.ARRAY(sa.Text)),
        sa.column("image_url", sa.Text),
        sa.column("latitude", sa.Float),
        sa.column("longitude", sa.Float),
        sa.column("pet_friendly", sa.Boolean),
        sa.column("created_at", postgresql.TIMESTAMP(timezone=True)),
        sa.column("created_by", sa.String),
        sa.column("created_by_display_name", sa.String),
        sa.column("created_by_photo_url", sa.Text),
    )

    op.bulk_insert(spots_table, [spot_to_dict(spot) for spot in initial_spots()])


def downgrade() -> None:
    """Remove seeded spots."""
    ids = ", ".join(f"'{spot_id}'" for spot_id in INITIAL_SPOT_RECORDS)
    op.execute(f"DELETE FROM spots WHERE id IN ({ids})")
