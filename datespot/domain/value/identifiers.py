"""Strongly typed identifiers for date spot entities.

Spot and user identifiers are opaque strings: seeded spots use short ids
and user ids come from the external identity provider.
"""

from typing import NewType
from uuid import UUID

SpotId = NewType("SpotId", str)
UserId = NewType("UserId", str)
VoteId = NewType("VoteId", UUID)
