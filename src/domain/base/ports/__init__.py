"""Domain ports for infrastructure concerns."""

from .import_service_port import ImportService
from .time_service_port import TimeService

__all__ = [
    "ImportService",
    "TimeService",
]
