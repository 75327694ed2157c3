"""Domain model entities for date spots."""

from datespot.domain.model.session import Session, SessionUser
from datespot.domain.model.spot import Spot
from datespot.domain.model.vote import Vote

__all__ = [
    "Session",
    "SessionUser",
    "Spot",
    "Vote",
]
