"""Vote entity.

A vote is one user's up or down endorsement of a spot.
"""

from datetime import datetime

from pydantic import Field

from datespot.domain.model.common import DomainModel
from datespot.domain.model.spot import utcnow
from datespot.domain.value import SpotId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (user, spot) pair (enforced by database unique constraint)
    - Changing direction updates the existing record in place
    - Retracting deletes the record
    """

    id: VoteId
    user_id: UserId
    spot_id: SpotId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)
