"""Client session context.

A session holds the signed-in user (if any) and that user's vote index.
It is rebuilt from the store whenever the auth state changes and is never
shared between users.
"""

from typing import Optional

from pydantic import BaseModel, Field

from datespot.domain.model.common import DomainModel
from datespot.domain.value import SpotId, UserId, VoteType


class SessionUser(DomainModel):
    """Authenticated user as reported by the identity provider."""

    user_id: UserId
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None


class Session(BaseModel):
    """Session context passed into the vote ledger and the gate."""

    user: Optional[SessionUser] = None
    votes: dict[SpotId, VoteType] = Field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> Optional[UserId]:
        return self.user.user_id if self.user else None

    def vote_for(self, spot_id: SpotId) -> Optional[VoteType]:
        """Current vote of this user on a spot, if any."""
        return self.votes.get(spot_id)

    def record_vote(self, spot_id: SpotId, vote_type: Optional[VoteType]) -> None:
        """Mirror a committed vote change into the local index."""
        if vote_type is None:
            self.votes.pop(spot_id, None)
        else:
            self.votes[spot_id] = vote_type

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()
