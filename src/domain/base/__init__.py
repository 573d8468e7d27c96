"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import Entity
from .ports import ImportService, TimeService

__all__ = [
    "Entity",
    "ImportService",
    "TimeService",
]
