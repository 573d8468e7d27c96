"""Base DTO class with stable API and clean snake_case format."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs.

    Provides a stable to_dict()/from_dict() API that hides the underlying
    serialization framework from callers.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON compatible snake_case dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseDTO":
        return cls.model_validate(data)
