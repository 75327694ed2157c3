"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from datespot.domain.model import Vote
from datespot.domain.repository import VoteRepository
from datespot.domain.value import SpotId, UserId, VoteType
from datespot.persistence.mappers import row_to_vote, vote_to_dict
from datespot.persistence.tables import votes_table


def _user_spot(
    user_id: UserId, spot_id: SpotId, vote_type: Optional[VoteType] = None
):
    clause = and_(votes_table.c.user_id == user_id, votes_table.c.spot_id == spot_id)
    if vote_type is not None:
        clause = and_(clause, votes_table.c.vote_type == vote_type.value)
    return clause


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_spot(
        self, user_id: UserId, spot_id: SpotId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific spot."""
        stmt = select(votes_table).where(_user_spot(user_id, spot_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user."""
        stmt = select(votes_table).where(votes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_type(
        self,
        user_id: UserId,
        spot_id: SpotId,
        vote_type: VoteType,
        expected: Optional[VoteType] = None,
    ) -> Optional[Vote]:
        """Change the direction of an existing vote."""
        stmt = (
            update(votes_table)
            .where(_user_spot(user_id, spot_id, expected))
            .values(vote_type=vote_type.value)
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete_by_user_and_spot(
        self,
        user_id: UserId,
        spot_id: SpotId,
        expected: Optional[VoteType] = None,
    ) -> bool:
        """Delete a user's vote on a spot."""
        stmt = (
            delete(votes_table)
            .where(_user_spot(user_id, spot_id, expected))
            .returning(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.fetchone() is not None
        await self.session.flush()
        return deleted
