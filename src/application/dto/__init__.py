"""Data transfer objects."""

from .base import BaseDTO
from .responses import ImportSummary

__all__ = ["BaseDTO", "ImportSummary"]
