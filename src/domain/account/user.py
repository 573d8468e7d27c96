"""User entity."""
from pydantic import field_validator

from src.domain.base.entity import Entity


class User(Entity):
    """Person owning one or more accounts."""

    id: str
    name: str
    email: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("User name must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError(f"Invalid email address: {value}")
        return value.lower()
