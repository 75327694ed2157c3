"""PostgreSQL implementation of Spot repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from datespot.domain.model import Spot
from datespot.domain.repository import SpotRepository
from datespot.domain.value import SpotId
from datespot.persistence.mappers import row_to_spot, spot_to_dict
from datespot.persistence.tables import spots_table


class PostgresSpotRepository(SpotRepository):
    """PostgreSQL implementation of SpotRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, spot_id: SpotId) -> Optional[Spot]:
        """Find a spot by ID."""
        with logfire.span("spot_repository.find_by_id", spot_id=spot_id):
            stmt = select(spots_table).where(spots_table.c.id == spot_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_spot(row._asdict()) if row else None

    async def find_all(self) -> List[Spot]:
        """Find all spots, newest first."""
        with logfire.span("spot_repository.find_all"):
            stmt = select(spots_table).order_by(desc(spots_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_spot(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all spots."""
        stmt = select(func.count()).select_from(spots_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, spot: Spot) -> Spot:
        """Save a spot (upsert by ID)."""
        spot_dict = spot_to_dict(spot)
        stmt = insert(spots_table).values(**spot_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[spots_table.c.id],
            set_={k: v for k, v in spot_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return spot

    async def apply_vote_delta(
        self, spot_id: SpotId, upvotes: int = 0, downvotes: int = 0
    ) -> Optional[Spot]:
        """Apply counter deltas with GREATEST(col + delta, 0)."""
        stmt = (
            update(spots_table)
            .where(spots_table.c.id == spot_id)
            .values(
                upvotes=func.greatest(spots_table.c.upvotes + upvotes, 0),
                downvotes=func.greatest(spots_table.c.downvotes + downvotes, 0),
            )
            .returning(*spots_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()

        if not row:
            logfire.warn("Vote delta on missing spot", spot_id=spot_id)
            return None
        return row_to_spot(row._asdict())

    async def apply_rating(self, spot_id: SpotId, value: int) -> Optional[Spot]:
        """Fold a rating into the running mean in one UPDATE."""
        total = spots_table.c.total_votes
        stmt = (
            update(spots_table)
            .where(spots_table.c.id == spot_id)
            .values(
                rating=(spots_table.c.rating * total + value) / (total + 1),
                total_votes=total + 1,
            )
            .returning(*spots_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()

        if not row:
            logfire.warn("Rating on missing spot", spot_id=spot_id)
            return None
        return row_to_spot(row._asdict())
