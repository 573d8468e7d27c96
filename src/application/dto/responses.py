"""Response DTOs for application use cases."""
from typing import List

from pydantic import Field

from .base import BaseDTO


class ImportSummary(BaseDTO):
    """Outcome of an account import run."""

    imported: List[str] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)

    @property
    def imported_count(self) -> int:
        return len(self.imported)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
