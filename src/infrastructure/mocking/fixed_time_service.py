"""Deterministic clock for tests and dry runs."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from src.domain.base.ports.time_service_port import TimeService

DEFAULT_INSTANT = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FixedTimeService(TimeService):
    """TimeService returning a configured instant until advanced."""

    def __init__(self, instant: Optional[datetime] = None):
        self._instant = instant or DEFAULT_INSTANT

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward and return the new instant."""
        self._instant = self._instant + delta
        return self._instant
