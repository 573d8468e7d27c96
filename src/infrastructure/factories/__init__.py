"""Infrastructure factories for creating configured components."""

from .import_service_factory import ImportServiceFactory

__all__ = [
    "ImportServiceFactory",
]
