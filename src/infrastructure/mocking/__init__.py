"""Test doubles and data object parents."""

from .data_object_parent import DataObjectParent
from .fixed_time_service import FixedTimeService

__all__ = ["DataObjectParent", "FixedTimeService"]
