"""Live spot feed.

Committed mutations publish snapshots to a ``SnapshotBroker``. Each live
connection owns one ``Subscription`` and one ``LiveSpotView``, which folds
events into its state wholesale and re-derives the displayed list. The view
is the only reader of its subscription, so its state has a single writer.
"""

import asyncio
from typing import Awaitable, Callable, Optional, Sequence, Union

import logfire
from pydantic import BaseModel, Field

from datespot.domain.model import Spot
from datespot.domain.service.spot_view import SpotViewCriteria, derive_spots
from datespot.domain.value import SpotId, UserId, VoteType


class SpotsSnapshot(BaseModel):
    """Full spot list after a committed change."""

    spots: list[Spot]


class UserVotesSnapshot(BaseModel):
    """Full vote index of one user after a committed change."""

    user_id: UserId
    votes: dict[SpotId, VoteType] = Field(default_factory=dict)


class CriteriaChanged(BaseModel):
    """New view criteria sent by the client."""

    criteria: SpotViewCriteria


LiveEvent = Union[SpotsSnapshot, UserVotesSnapshot, CriteriaChanged]


class Subscription:
    """Pending events of one subscriber, one slot per event kind.

    Every event carries the complete state of its kind, so a newer event
    replaces a pending one of the same kind instead of queueing behind it.
    Events of different kinds never displace each other.
    """

    def __init__(self, broker: "SnapshotBroker", user_id: Optional[UserId]) -> None:
        self.broker = broker
        self.user_id = user_id
        self._pending: dict[type, LiveEvent] = {}
        self._ready = asyncio.Event()
        self.pushed = 0
        self.replaced = 0

    def push(self, event: LiveEvent) -> None:
        kind = type(event)
        if kind in self._pending:
            self.replaced += 1
        self._pending[kind] = event
        self.pushed += 1
        self._ready.set()

    def pending(self) -> list[LiveEvent]:
        """Events not yet consumed, oldest slot first."""
        return list(self._pending.values())

    async def next_event(self) -> LiveEvent:
        while not self._pending:
            self._ready.clear()
            await self._ready.wait()
        return self._pending.pop(next(iter(self._pending)))

    def close(self) -> None:
        self.broker.unsubscribe(self)


class SnapshotBroker:
    """Fans committed snapshots out to live subscribers."""

    def __init__(self) -> None:
        self._subscriptions: set[Subscription] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, user_id: Optional[UserId] = None) -> Subscription:
        """Register a subscriber.

        Args:
            user_id: Signed-in user of the connection, for vote index updates
        """
        subscription = Subscription(self, user_id)
        self._subscriptions.add(subscription)
        logfire.debug("Live subscriber added", count=self.subscriber_count)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        self._subscriptions.discard(subscription)
        logfire.debug("Live subscriber removed", count=self.subscriber_count)

    def publish_spots(self, spots: Sequence[Spot]) -> None:
        event = SpotsSnapshot(spots=list(spots))
        for subscription in list(self._subscriptions):
            subscription.push(event)

    def publish_user_votes(
        self, user_id: UserId, votes: dict[SpotId, VoteType]
    ) -> None:
        event = UserVotesSnapshot(user_id=user_id, votes=votes)
        for subscription in list(self._subscriptions):
            if subscription.user_id == user_id:
                subscription.push(event)


class LiveFrame(BaseModel):
    """One derived view sent to a live client."""

    spots: list[Spot]
    votes: dict[SpotId, VoteType]
    criteria: SpotViewCriteria


class LiveSpotView:
    """Single consumer of a subscription, holding one client's view state."""

    def __init__(self, criteria: Optional[SpotViewCriteria] = None) -> None:
        self.spots: list[Spot] = []
        self.votes: dict[SpotId, VoteType] = {}
        self.criteria = criteria or SpotViewCriteria()

    def apply(self, event: LiveEvent) -> None:
        """Replace the part of the state the event carries."""
        if isinstance(event, SpotsSnapshot):
            self.spots = list(event.spots)
        elif isinstance(event, UserVotesSnapshot):
            self.votes = dict(event.votes)
        elif isinstance(event, CriteriaChanged):
            self.criteria = event.criteria

    def render(self) -> LiveFrame:
        return LiveFrame(
            spots=derive_spots(self.spots, self.criteria),
            votes=dict(self.votes),
            criteria=self.criteria,
        )

    async def run(
        self, subscription: Subscription, emit: Callable[[LiveFrame], Awaitable[None]]
    ) -> None:
        """Consume events until cancelled, emitting a frame after each one.

        The subscription is closed when the loop ends for any reason.
        """
        try:
            while True:
                event = await subscription.next_event()
                self.apply(event)
                await emit(self.render())
        finally:
            subscription.close()
