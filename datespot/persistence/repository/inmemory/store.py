"""Shared in-memory state backing the in-memory repositories."""

from datespot.domain.model import Spot, Vote
from datespot.domain.value import SpotId


class InMemoryStore:
    """Process-wide spot and vote tables.

    Repositories are created per request, so they wrap one shared store
    to keep data between requests.
    """

    def __init__(self) -> None:
        self.spots: dict[SpotId, Spot] = {}
        self.votes: list[Vote] = []

    def clear(self) -> None:
        self.spots.clear()
        self.votes.clear()
