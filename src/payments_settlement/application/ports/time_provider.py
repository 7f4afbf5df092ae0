from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Clock used to stamp registrations.

    now() returns an aware datetime in UTC. stamp() prefers the
    caller's own timestamp and only falls back to the clock when the
    caller sent none.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time with tzinfo=datetime.UTC."""

    def stamp(self, requested: datetime | None) -> datetime:
        """Return the registration time for a request.

        The requested value is passed through untouched; Payment.create
        converts it to UTC or rejects it when naive.
        """
        if requested is not None:
            return requested
        return self.now()
