"""Clock access."""

from .system_time_service import SystemTimeService

__all__ = ["SystemTimeService"]
