"""Time service port for reading the current time."""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeService(ABC):
    """Port for reading the current time.

    Code that needs "now" depends on this port rather than on the system
    clock, so tests can substitute a fixed clock.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
